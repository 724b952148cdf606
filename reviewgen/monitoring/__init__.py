"""
Monitoring module for metrics, costs and alerting.
"""

from reviewgen.monitoring.alerts import AlertEvaluator, AlertType, LoggingAlertSink
from reviewgen.monitoring.cost_meter import CostMeter
from reviewgen.monitoring.metrics import MetricsRecorder
from reviewgen.monitoring.store import (
    InMemoryMetricsStore,
    JsonFileMetricsStore,
    MetricsStore,
    RedisMetricsStore,
    create_metrics_store,
)

__all__ = [
    "AlertEvaluator",
    "AlertType",
    "CostMeter",
    "InMemoryMetricsStore",
    "JsonFileMetricsStore",
    "LoggingAlertSink",
    "MetricsRecorder",
    "MetricsStore",
    "RedisMetricsStore",
    "create_metrics_store",
]
