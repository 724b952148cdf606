"""Test A/B experiment gate."""

import pytest

from reviewgen.experiments.ab_assigner import ARM_LLM, ARM_TEMPLATE, ABAssigner


class TestABAssigner:
    """Test arm assignment."""

    def test_zero_percent_never_uses_provider(self):
        assigner = ABAssigner(llm_percentage=0, random_source=lambda: 0.0)

        assert not assigner.should_use_provider()

    def test_hundred_percent_always_uses_provider(self):
        assigner = ABAssigner(llm_percentage=100, random_source=lambda: 0.9999)

        assert assigner.should_use_provider()

    def test_draw_below_percentage_selects_llm(self):
        assigner = ABAssigner(llm_percentage=30, random_source=lambda: 0.29)

        assert assigner.assign() == ARM_LLM

    def test_draw_at_percentage_selects_template(self):
        assigner = ABAssigner(llm_percentage=30, random_source=lambda: 0.30)

        assert assigner.assign() == ARM_TEMPLATE

    def test_draws_independently_per_call(self):
        """Test assignment is not sticky."""
        draws = iter([0.1, 0.9, 0.1])
        assigner = ABAssigner(llm_percentage=50, random_source=lambda: next(draws))

        assert [assigner.assign() for _ in range(3)] == [ARM_LLM, ARM_TEMPLATE, ARM_LLM]

    def test_rejects_out_of_range_percentage(self):
        with pytest.raises(ValueError):
            ABAssigner(llm_percentage=101)
