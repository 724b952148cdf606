"""
Generation metrics recorder.

Sandi Metz Principles:
- Single Responsibility: Aggregate request counters and latency
- Small methods: Each method does one thing
- Clear naming: Dotted metric paths
"""

import copy
import threading
from typing import Any, Dict, Optional

from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

LATENCY_PATH = "latency"


def default_state() -> Dict[str, Any]:
    """Build an empty metrics state."""
    return {
        "requests": {"total": 0, "success": 0, "errors": 0},
        "cache": {"hits": 0, "misses": 0},
        "provider": {
            "primary": {"success": 0, "errors": 0, "units": 0},
            "secondary": {"success": 0, "errors": 0},
        },
        "fallback": {"template": 0, "emergency": 0},
        "errors": {"total": 0},
        "latency": {"sum": 0.0, "count": 0, "min": None, "max": 0.0},
        "cost": {"daily": 0.0, "monthly": 0.0, "total": 0.0},
        "experiments": {"llm": 0, "template": 0},
    }


class MetricsRecorder:
    """
    Dotted-path counter store.

    record("provider.primary.errors") increments the nested counter,
    creating intermediate nodes as needed. The latency path keeps a
    running sum, count, min and max instead of a single counter.
    """

    def __init__(self):
        """Initialize recorder with zeroed counters."""
        self._state = default_state()
        self._lock = threading.Lock()

    def record(self, path: str, value: float = 1) -> None:
        """
        Increment counter at path.

        Args:
            path: Dotted metric path (e.g., "cache.hits")
            value: Increment, or the sample in ms for the latency path
        """
        with self._lock:
            if path == LATENCY_PATH:
                self._record_latency(value)
                return
            node, leaf = self._resolve(path)
            node[leaf] = node.get(leaf, 0) + value

    def set(self, path: str, value: float) -> None:
        """
        Overwrite value at path.

        Args:
            path: Dotted metric path
            value: New value
        """
        with self._lock:
            node, leaf = self._resolve(path)
            node[leaf] = value

    def get(self, path: str, default: Any = 0) -> Any:
        """
        Read value at path.

        Args:
            path: Dotted metric path
            default: Value returned when the path is unknown

        Returns:
            Stored value or default
        """
        with self._lock:
            node: Any = self._state
            for part in path.split("."):
                if not isinstance(node, dict) or part not in node:
                    return default
                node = node[part]
            return copy.deepcopy(node)

    @property
    def average_latency_ms(self) -> float:
        """Get mean latency of recorded requests."""
        count = self.get("latency.count")
        return self.get("latency.sum") / count if count else 0.0

    @property
    def error_rate(self) -> float:
        """Get share of requests that saw a provider failure."""
        total = self.get("requests.total")
        return self.get("requests.errors") / total if total else 0.0

    def summary(self) -> Dict[str, Any]:
        """
        Build a reporting summary.

        Returns:
            Totals, rates, latency and cost figures
        """
        state = self.snapshot()
        requests = state["requests"]
        cache = state["cache"]
        lookups = cache["hits"] + cache["misses"]
        return {
            "requests": requests,
            "success_rate": self._ratio(requests["success"], requests["total"]),
            "error_rate": self._ratio(requests["errors"], requests["total"]),
            "cache_hit_rate": self._ratio(cache["hits"], lookups),
            "average_latency_ms": round(self.average_latency_ms, 2),
            "max_latency_ms": state["latency"]["max"],
            "min_latency_ms": state["latency"]["min"],
            "cost": state["cost"],
            "providers": state["provider"],
            "fallbacks": state["fallback"],
            "errors": state["errors"],
            "experiments": state["experiments"],
        }

    def snapshot(self) -> Dict[str, Any]:
        """Get a deep copy of the raw state."""
        with self._lock:
            return copy.deepcopy(self._state)

    def restore(self, snapshot: Optional[Dict[str, Any]]) -> None:
        """
        Replace state from a snapshot.

        Unknown keys are kept and missing keys fall back to zero. A
        snapshot of the wrong shape is ignored and counters start at zero.

        Args:
            snapshot: State previously produced by snapshot()
        """
        state = default_state()
        try:
            if not isinstance(snapshot or {}, dict):
                raise TypeError(f"expected mapping, got {type(snapshot).__name__}")
            _merge(state, snapshot or {})
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Ignoring malformed metrics snapshot", error=str(e))
            state = default_state()

        with self._lock:
            self._state = state
        logger.info("Metrics restored", requests=state["requests"]["total"])

    def reset(self) -> None:
        """Zero every counter."""
        with self._lock:
            self._state = default_state()

    def _record_latency(self, sample_ms: float) -> None:
        """Update latency aggregate (lock held)."""
        latency = self._state[LATENCY_PATH]
        latency["sum"] += sample_ms
        latency["count"] += 1
        latency["max"] = max(latency["max"], sample_ms)
        if latency["min"] is None or sample_ms < latency["min"]:
            latency["min"] = sample_ms

    def _resolve(self, path: str) -> tuple[Dict[str, Any], str]:
        """Walk to the parent node of path, creating nodes (lock held)."""
        *parents, leaf = path.split(".")
        node = self._state
        for part in parents:
            node = node.setdefault(part, {})
        return node, leaf

    @staticmethod
    def _ratio(part: float, whole: float) -> float:
        return round(part / whole, 4) if whole else 0.0


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """
    Recursively merge source into target.

    Raises:
        TypeError: If a node and a counter collide or a counter is not numeric
    """
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, dict):
            if current is not None and not isinstance(current, dict):
                raise TypeError(f"{key}: expected counter, got mapping")
            _merge(target.setdefault(key, {}), value)
        elif isinstance(current, dict):
            raise TypeError(f"{key}: expected mapping, got {type(value).__name__}")
        elif value is None and current is not None:
            raise TypeError(f"{key}: expected number, got None")
        elif value is not None and (
            isinstance(value, bool) or not isinstance(value, (int, float))
        ):
            raise TypeError(f"{key}: expected number, got {type(value).__name__}")
        else:
            target[key] = value
