"""
Provider cost meter.

Sandi Metz Principles:
- Single Responsibility: Accrue provider spend by day and month
- Dependency Injection: Date source injected for testability
"""

import threading
from datetime import date
from typing import Any, Callable, Dict, Optional

from reviewgen.llm.cost_calculator import CostCalculator
from reviewgen.monitoring.metrics import MetricsRecorder
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

BILLED_SLOT = "primary"


class CostMeter:
    """
    Daily, monthly and running cost totals.

    Buckets are keyed by calendar date (YYYY-MM-DD) and month (YYYY-MM),
    so a new day starts at zero without an explicit reset. Only the
    primary slot is billed.
    """

    def __init__(
        self,
        cost_per_unit: float,
        metrics: Optional[MetricsRecorder] = None,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize cost meter.

        Args:
            cost_per_unit: USD per 1K units for the primary slot
            metrics: Recorder mirroring cost.daily/monthly/total
            today: Current date source
        """
        self._calculator = CostCalculator(cost_per_unit)
        self._metrics = metrics
        self._today = today
        self._daily: Dict[str, float] = {}
        self._monthly: Dict[str, float] = {}
        self._total = 0.0
        self._lock = threading.Lock()

    def track_cost(self, provider: str, units: int) -> float:
        """
        Accrue cost for provider usage.

        Args:
            provider: Slot that served the request ("primary", "secondary")
            units: Usage units reported by the backend

        Returns:
            Cost added in USD (0 for unbilled slots)
        """
        if provider != BILLED_SLOT:
            return 0.0

        cost = self._calculator.calculate(units)
        day_key, month_key = self._keys()
        with self._lock:
            self._daily[day_key] = self._daily.get(day_key, 0.0) + cost
            self._monthly[month_key] = self._monthly.get(month_key, 0.0) + cost
            self._total += cost
        self._mirror()
        return cost

    def today_cost(self) -> float:
        """Get cost accrued today."""
        with self._lock:
            return self._daily.get(self._keys()[0], 0.0)

    def month_cost(self) -> float:
        """Get cost accrued this month."""
        with self._lock:
            return self._monthly.get(self._keys()[1], 0.0)

    @property
    def total(self) -> float:
        """Get cost accrued since start."""
        return self._total

    def snapshot(self) -> Dict[str, Any]:
        """Get buckets for persistence."""
        with self._lock:
            return {
                "daily": dict(self._daily),
                "monthly": dict(self._monthly),
                "total": self._total,
            }

    def restore(self, snapshot: Optional[Dict[str, Any]]) -> None:
        """
        Replace buckets from a snapshot.

        A snapshot of the wrong shape is ignored and buckets start empty.

        Args:
            snapshot: Buckets previously produced by snapshot()
        """
        try:
            daily, monthly, total = _parse_buckets(snapshot or {})
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Ignoring malformed cost snapshot", error=str(e))
            daily, monthly, total = {}, {}, 0.0

        with self._lock:
            self._daily = daily
            self._monthly = monthly
            self._total = total
        self._mirror()

    def _keys(self) -> tuple[str, str]:
        current = self._today()
        return current.isoformat(), current.strftime("%Y-%m")

    def _mirror(self) -> None:
        """Copy current buckets into the metrics recorder."""
        if self._metrics is None:
            return
        self._metrics.set("cost.daily", self.today_cost())
        self._metrics.set("cost.monthly", self.month_cost())
        self._metrics.set("cost.total", self._total)


def _parse_buckets(
    snapshot: Dict[str, Any],
) -> tuple[Dict[str, float], Dict[str, float], float]:
    """
    Validate persisted cost buckets.

    Raises:
        TypeError: If the snapshot or a bucket is not a mapping
        ValueError: If an amount is not a number
    """
    if not isinstance(snapshot, dict):
        raise TypeError(f"expected mapping, got {type(snapshot).__name__}")

    buckets = []
    for name in ("daily", "monthly"):
        bucket = snapshot.get(name, {})
        if not isinstance(bucket, dict):
            raise TypeError(f"{name}: expected mapping, got {type(bucket).__name__}")
        buckets.append({str(key): float(amount) for key, amount in bucket.items()})
    return buckets[0], buckets[1], float(snapshot.get("total", 0.0))
