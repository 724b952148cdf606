"""
Threshold alerts for generation metrics.

Sandi Metz Principles:
- Single Responsibility: Alert evaluation and delivery
- Configurable: Thresholds and sinks injected
- Clear naming: Descriptive alert types
"""

import asyncio
import inspect
import time
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set, Union

from reviewgen.models.alert import AlertEvent, AlertThresholds
from reviewgen.monitoring.cost_meter import CostMeter
from reviewgen.monitoring.metrics import MetricsRecorder
from reviewgen.utils.logger import get_logger, log_alert

logger = get_logger(__name__)

AlertSink = Callable[[AlertEvent], Union[None, Awaitable[None]]]


class AlertType(str, Enum):
    """Alert types."""

    ERROR_RATE = "error_rate"
    LATENCY = "latency"
    COST = "cost"


class LoggingAlertSink:
    """Alert sink writing each event to the structured log."""

    def __call__(self, event: AlertEvent) -> None:
        log_alert(event.type, event.message)


class AlertEvaluator:
    """
    Compares metric aggregates to static thresholds.

    Each breach emits one event to every sink. A per-type cooldown
    can suppress repeats; the default of zero emits on every breach.
    """

    def __init__(
        self,
        thresholds: AlertThresholds | None = None,
        sinks: Optional[List[AlertSink]] = None,
        cooldown_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize evaluator.

        Args:
            thresholds: Comparison targets (defaults if None)
            sinks: Event receivers (logging sink if None)
            cooldown_seconds: Suppression window per alert type
            clock: Monotonic time source in seconds
        """
        self._thresholds = thresholds or AlertThresholds()
        self._sinks: List[AlertSink] = (
            list(sinks) if sinks is not None else [LoggingAlertSink()]
        )
        self._cooldown = cooldown_seconds
        self._clock = clock
        self._last_emitted: Dict[str, float] = {}
        self._pending: Set["asyncio.Future[Any]"] = set()

    def add_sink(self, sink: AlertSink) -> None:
        """
        Add an alert sink.

        Args:
            sink: Callable that receives AlertEvent objects
        """
        self._sinks.append(sink)

    def evaluate(
        self, metrics: MetricsRecorder, cost_meter: CostMeter
    ) -> List[AlertEvent]:
        """
        Evaluate every threshold and notify sinks of breaches.

        Args:
            metrics: Request metrics
            cost_meter: Cost buckets

        Returns:
            Events emitted by this evaluation
        """
        try:
            breaches = self._check(metrics, cost_meter)
        except Exception as e:
            logger.error("Alert evaluation failed", error=str(e))
            return []

        if not breaches:
            return []

        snapshot = metrics.summary()
        events = []
        for alert_type, message in breaches:
            if self._suppressed(alert_type):
                continue
            event = AlertEvent(type=alert_type, message=message, metrics_snapshot=snapshot)
            self._notify_sinks(event)
            events.append(event)
        return events

    def _check(self, metrics: MetricsRecorder, cost_meter: CostMeter) -> List[tuple]:
        """Collect (type, message) for each breached threshold."""
        breaches = []
        error_rate = metrics.error_rate
        if error_rate > self._thresholds.error_rate:
            breaches.append(
                (AlertType.ERROR_RATE.value,
                 f"Error rate {error_rate * 100:.1f}% exceeds threshold")
            )

        latency = metrics.average_latency_ms
        if latency > self._thresholds.latency_ms:
            breaches.append(
                (AlertType.LATENCY.value,
                 f"Average latency {latency:.0f}ms exceeds threshold")
            )

        daily_cost = cost_meter.today_cost()
        if daily_cost > self._thresholds.cost_per_day:
            breaches.append(
                (AlertType.COST.value, f"Daily cost ${daily_cost:.2f} exceeds threshold")
            )
        return breaches

    def _suppressed(self, alert_type: str) -> bool:
        """Check cooldown and remember emission time."""
        now = self._clock()
        last = self._last_emitted.get(alert_type)
        if self._cooldown > 0 and last is not None and now - last < self._cooldown:
            return True
        self._last_emitted[alert_type] = now
        return False

    def _notify_sinks(self, event: AlertEvent) -> None:
        """Deliver event to every sink without waiting."""
        for sink in self._sinks:
            try:
                result = sink(event)
                if inspect.isawaitable(result):
                    task = asyncio.ensure_future(result)
                    self._pending.add(task)
                    task.add_done_callback(self._pending.discard)
                    task.add_done_callback(self._log_sink_failure)
            except Exception as e:
                logger.error("Alert sink failed", alert=event.type, error=str(e))

    @staticmethod
    def _log_sink_failure(task: "asyncio.Future[Any]") -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error("Alert sink failed", error=str(task.exception()))

    @property
    def pending_deliveries(self) -> int:
        """Get number of async sink deliveries still running."""
        return len(self._pending)

    @property
    def thresholds(self) -> AlertThresholds:
        """Get comparison targets."""
        return self._thresholds
