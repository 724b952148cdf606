"""Test metrics recorder."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from reviewgen.monitoring.metrics import MetricsRecorder


class TestMetricsRecorder:
    """Test dotted-path counters."""

    def test_should_increment_counter(self, metrics):
        metrics.record("requests.total")
        metrics.record("requests.total")

        assert metrics.get("requests.total") == 2

    def test_should_increment_by_value(self, metrics):
        metrics.record("provider.primary.units", 150)

        assert metrics.get("provider.primary.units") == 150

    def test_should_create_intermediate_nodes(self, metrics):
        metrics.record("custom.nested.counter")

        assert metrics.get("custom.nested.counter") == 1

    def test_should_return_default_for_unknown_path(self, metrics):
        assert metrics.get("nope.missing", default=None) is None

    def test_latency_updates_aggregate(self, metrics):
        """Test latency path keeps sum, count, min and max."""
        for sample in (120.0, 40.0, 200.0):
            metrics.record("latency", sample)

        latency = metrics.get("latency")
        assert latency == {"sum": 360.0, "count": 3, "min": 40.0, "max": 200.0}
        assert metrics.average_latency_ms == 120.0

    def test_error_rate(self, metrics):
        metrics.record("requests.total", 10)
        metrics.record("requests.errors", 6)

        assert metrics.error_rate == 0.6

    def test_error_rate_without_requests(self, metrics):
        assert metrics.error_rate == 0.0

    def test_summary(self, metrics):
        """Test summary rates."""
        metrics.record("requests.total", 4)
        metrics.record("requests.success", 3)
        metrics.record("cache.hits", 1)
        metrics.record("cache.misses", 3)
        metrics.record("latency", 100.0)

        summary = metrics.summary()

        assert summary["success_rate"] == 0.75
        assert summary["cache_hit_rate"] == 0.25
        assert summary["average_latency_ms"] == 100.0
        assert summary["fallbacks"] == {"template": 0, "emergency": 0}

    def test_snapshot_is_a_copy(self, metrics):
        snapshot = metrics.snapshot()
        snapshot["requests"]["total"] = 99

        assert metrics.get("requests.total") == 0

    def test_restore_merges_with_defaults(self, metrics):
        """Test restore keeps missing counters at zero."""
        metrics.restore({"requests": {"total": 7}})

        assert metrics.get("requests.total") == 7
        assert metrics.get("requests.errors") == 0
        assert metrics.get("cache.hits") == 0

    def test_thread_safe_increments(self):
        """Test concurrent increments are not lost."""
        recorder = MetricsRecorder()

        def work():
            for _ in range(1000):
                recorder.record("requests.total")

        threads = [threading.Thread(target=work) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert recorder.get("requests.total") == 4000

    def test_thread_pool_records_exact_totals(self):
        """Test counters and latency stay exact under a worker pool."""
        recorder = MetricsRecorder()

        def work(worker: int):
            for _ in range(500):
                recorder.record("requests.total")
                recorder.record(f"provider.worker{worker}.calls")
                recorder.record("latency", 10)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(work, range(8)))

        assert recorder.get("requests.total") == 4000
        assert recorder.get("latency.count") == 4000
        assert recorder.get("latency.sum") == pytest.approx(40000)
        assert all(recorder.get(f"provider.worker{i}.calls") == 500 for i in range(8))

    @pytest.mark.parametrize(
        "snapshot",
        [
            [1, 2],
            {"requests": 5},
            {"requests": {"total": "many"}},
            {"latency": {"count": None}},
            {"cache": {"hits": {"today": 1}}},
        ],
    )
    def test_restore_ignores_malformed_snapshot(self, metrics, snapshot):
        metrics.record("requests.total", 3)

        metrics.restore(snapshot)

        assert metrics.get("requests.total") == 0
        metrics.record("requests.total")
        metrics.record("latency", 5)
        assert metrics.get("requests.total") == 1
        assert metrics.get("latency.count") == 1
