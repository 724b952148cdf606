"""
Metrics persistence backends.

Sandi Metz Principles:
- Single Responsibility: Load and save metric snapshots
- Interface Segregation: load/save only
- Dependency Injection: Connection pool injected
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from redis.asyncio import ConnectionPool, Redis

from reviewgen.config import AppConfig
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

Snapshot = Dict[str, Any]


class MetricsStore(Protocol):
    """Best-effort durable storage for metric snapshots."""

    async def load(self) -> Optional[Snapshot]:
        """Load the last saved snapshot, None when absent or unreadable."""
        ...

    async def save(self, snapshot: Snapshot) -> None:
        """Save snapshot, logging and swallowing failures."""
        ...


class InMemoryMetricsStore:
    """Process-local store."""

    def __init__(self):
        self._snapshot: Optional[Snapshot] = None

    async def load(self) -> Optional[Snapshot]:
        return json.loads(json.dumps(self._snapshot)) if self._snapshot else None

    async def save(self, snapshot: Snapshot) -> None:
        self._snapshot = json.loads(json.dumps(snapshot))


class JsonFileMetricsStore:
    """
    JSON file store.

    File access runs in a worker thread so the event loop is not blocked.
    """

    def __init__(self, path: str | Path):
        """
        Initialize store.

        Args:
            path: Snapshot file path
        """
        self._path = Path(path)

    async def load(self) -> Optional[Snapshot]:
        """
        Load snapshot from file.

        Returns:
            Snapshot, or None if the file is missing or invalid
        """
        try:
            return await asyncio.to_thread(self._read)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning("Metrics load failed", path=str(self._path), error=str(e))
            return None

    async def save(self, snapshot: Snapshot) -> None:
        """
        Write snapshot to file.

        Args:
            snapshot: Metrics snapshot
        """
        try:
            await asyncio.to_thread(self._write, snapshot)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Metrics save failed", path=str(self._path), error=str(e))

    def _read(self) -> Snapshot:
        with self._path.open(encoding="utf-8") as handle:
            return json.load(handle)

    def _write(self, snapshot: Snapshot) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(snapshot, handle)
        tmp_path.replace(self._path)


class RedisMetricsStore:
    """Redis store keeping the snapshot as one JSON value."""

    def __init__(self, pool: ConnectionPool, key: str = "reviewgen:metrics"):
        """
        Initialize store.

        Args:
            pool: Redis connection pool
            key: Key holding the snapshot
        """
        self._pool = pool
        self._key = key

    async def load(self) -> Optional[Snapshot]:
        """
        Load snapshot from Redis.

        Returns:
            Snapshot, or None if absent or unreadable
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                data = await client.get(self._key)
                return json.loads(data) if data else None
        except Exception as e:
            logger.warning("Redis metrics load failed", key=self._key, error=str(e))
            return None

    async def save(self, snapshot: Snapshot) -> None:
        """
        Store snapshot in Redis.

        Args:
            snapshot: Metrics snapshot
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                await client.set(self._key, json.dumps(snapshot))
        except Exception as e:
            logger.error("Redis metrics save failed", key=self._key, error=str(e))


def create_redis_pool(redis_url: str) -> ConnectionPool:
    """
    Create Redis connection pool.

    Args:
        redis_url: Redis URL

    Returns:
        Redis connection pool
    """
    return ConnectionPool.from_url(redis_url, decode_responses=True)


def create_metrics_store(app_config: AppConfig) -> MetricsStore:
    """
    Build the configured metrics store.

    Args:
        app_config: Application configuration

    Returns:
        Metrics store instance
    """
    if app_config.metrics_store == "file":
        return JsonFileMetricsStore(app_config.metrics_file_path)
    if app_config.metrics_store == "redis":
        pool = create_redis_pool(app_config.redis_url)
        return RedisMetricsStore(pool, key=app_config.redis_metrics_key)
    return InMemoryMetricsStore()
