"""Test cost meter."""

from datetime import date

import pytest

from reviewgen.monitoring.cost_meter import CostMeter


class FakeToday:
    """Settable date source."""

    def __init__(self, current: date):
        self.current = current

    def __call__(self) -> date:
        return self.current


class TestCostMeter:
    """Test cost accrual."""

    def test_primary_usage_accrues_cost(self, metrics):
        meter = CostMeter(cost_per_unit=0.002, metrics=metrics)

        cost = meter.track_cost("primary", 1000)

        assert cost == pytest.approx(0.002)
        assert meter.total == pytest.approx(0.002)
        assert metrics.get("cost.total") == pytest.approx(0.002)
        assert metrics.get("cost.daily") == pytest.approx(0.002)

    def test_secondary_usage_is_free(self, metrics):
        meter = CostMeter(cost_per_unit=0.002, metrics=metrics)

        assert meter.track_cost("secondary", 5000) == 0.0
        assert meter.total == 0.0
        assert metrics.get("cost.total") == 0.0

    def test_daily_bucket_rolls_over(self):
        """Test a new day starts at zero while month and total keep accruing."""
        today = FakeToday(date(2024, 3, 10))
        meter = CostMeter(cost_per_unit=1.0, today=today)
        meter.track_cost("primary", 1000)

        today.current = date(2024, 3, 11)

        assert meter.today_cost() == 0.0
        assert meter.month_cost() == pytest.approx(1.0)
        meter.track_cost("primary", 500)
        assert meter.today_cost() == pytest.approx(0.5)
        assert meter.total == pytest.approx(1.5)

    def test_monthly_bucket_rolls_over(self):
        today = FakeToday(date(2024, 3, 31))
        meter = CostMeter(cost_per_unit=1.0, today=today)
        meter.track_cost("primary", 1000)

        today.current = date(2024, 4, 1)

        assert meter.month_cost() == 0.0
        assert meter.total == pytest.approx(1.0)

    def test_snapshot_and_restore(self):
        today = FakeToday(date(2024, 3, 10))
        meter = CostMeter(cost_per_unit=1.0, today=today)
        meter.track_cost("primary", 2000)

        restored = CostMeter(cost_per_unit=1.0, today=today)
        restored.restore(meter.snapshot())

        assert restored.today_cost() == pytest.approx(2.0)
        assert restored.total == pytest.approx(2.0)

    @pytest.mark.parametrize(
        "snapshot",
        [
            [1, 2],
            {"daily": [1]},
            {"monthly": {"2024-03": "lots"}},
            {"total": "lots"},
        ],
    )
    def test_restore_ignores_malformed_snapshot(self, metrics, snapshot):
        today = FakeToday(date(2024, 3, 10))
        meter = CostMeter(cost_per_unit=1.0, metrics=metrics, today=today)
        meter.track_cost("primary", 1000)

        meter.restore(snapshot)

        assert meter.total == 0.0
        assert meter.today_cost() == 0.0
        meter.track_cost("primary", 1000)
        assert meter.total == pytest.approx(1.0)
        assert metrics.get("cost.daily") == pytest.approx(1.0)
