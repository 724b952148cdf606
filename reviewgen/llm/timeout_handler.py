"""
Provider timeout handler.

Sandi Metz Principles:
- Single Responsibility: Handle request deadlines
- Small methods: Each method does one thing
- Clear naming: Self-documenting code
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

from reviewgen.exceptions import ProviderTimeoutError
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TimeoutConfig:
    """Configuration for timeout handling."""

    def __init__(self, timeout_seconds: float = 3.0):
        """
        Initialize timeout configuration.

        Args:
            timeout_seconds: Deadline in seconds (default: 3)
        """
        self.timeout_seconds = timeout_seconds


class TimeoutHandler:
    """
    Runs an async operation under a hard deadline.

    On expiry the in-flight operation is cancelled, not awaited.
    """

    def __init__(
        self, config: TimeoutConfig | None = None, provider: Optional[str] = None
    ):
        """
        Initialize timeout handler.

        Args:
            config: Timeout configuration (creates default if None)
            provider: Provider name attached to timeout errors
        """
        self._config = config or TimeoutConfig()
        self._provider = provider

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        timeout_seconds: float | None = None,
    ) -> T:
        """
        Execute operation with deadline.

        Args:
            operation: Async function to execute
            timeout_seconds: Optional override (uses config if None)

        Returns:
            Operation result

        Raises:
            ProviderTimeoutError: If the deadline passes first
        """
        timeout = timeout_seconds or self._config.timeout_seconds

        try:
            return await asyncio.wait_for(operation(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning("Provider call timed out", provider=self._provider, timeout=timeout)
            raise ProviderTimeoutError(
                f"Request timed out after {timeout} seconds", provider=self._provider
            ) from e

    def get_timeout(self) -> float:
        """
        Get configured timeout value.

        Returns:
            Timeout in seconds
        """
        return self._config.timeout_seconds
