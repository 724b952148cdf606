"""Test cost calculator."""

import pytest

from reviewgen.llm.cost_calculator import CostCalculator


class TestCostCalculator:
    """Test cost calculations."""

    def test_calculate_per_thousand_units(self):
        """Test (units / 1000) * cost_per_unit."""
        assert CostCalculator(0.002).calculate(500) == pytest.approx(0.001)

    def test_zero_units_cost_nothing(self):
        """Test no usage."""
        assert CostCalculator(0.002).calculate(0) == 0.0

    def test_estimate_from_text_length(self):
        """Test four characters per unit estimate."""
        assert CostCalculator(1.0).estimate_from_text("a" * 4000) == pytest.approx(1.0)

    def test_estimate_prefers_reported_units(self):
        """Test reported units win over text estimate."""
        calculator = CostCalculator(1.0)

        assert calculator.estimate(2000, "short") == pytest.approx(2.0)
        assert calculator.estimate(0, "a" * 400) == pytest.approx(0.1)
