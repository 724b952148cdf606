"""
Retry logic for generation providers.

Sandi Metz Principles:
- Single Responsibility: Manage retry logic
- Small methods: Each method does one thing
- Dependency Injection: Configuration injected
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from reviewgen.exceptions import (
    ProviderHTTPError,
    ProviderNetworkError,
    ProviderTimeoutError,
)
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Retry configuration. Total attempts are max_retries + 1."""

    max_retries: int = 2
    initial_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0

    @property
    def max_attempts(self) -> int:
        """Get total attempts including the first one."""
        return self.max_retries + 1


class RetryHandler:
    """
    Exponential backoff retry handler.

    Retries timeouts, non-success statuses and network failures with
    delays of initial_delay * base^attempt (1s, 2s, 4s ... by default).
    """

    RETRYABLE = (ProviderTimeoutError, ProviderHTTPError, ProviderNetworkError)

    def __init__(
        self,
        config: RetryConfig | None = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        """
        Initialize retry handler.

        Args:
            config: Retry configuration (uses defaults if None)
            sleep: Async sleep function (asyncio.sleep if None)
        """
        self._config = config or RetryConfig()
        self._sleep = sleep or asyncio.sleep

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """
        Execute function with retry logic.

        Args:
            func: Async function to execute

        Returns:
            Function result

        Raises:
            ProviderError: Last error once retries are exhausted
        """
        attempts = self._config.max_attempts
        last_exception = None

        for attempt in range(attempts):
            try:
                return await func()
            except self.RETRYABLE as e:
                last_exception = e
                if attempt == attempts - 1:
                    logger.error(f"All {attempts} attempts failed", error=str(e))
                    raise

                delay = self._calculate_delay(attempt)
                logger.warning(
                    f"Attempt {attempt + 1} failed, retrying in {delay:.2f}s",
                    error=str(e),
                )
                await self._sleep(delay)

        raise last_exception  # type: ignore

    def _calculate_delay(self, attempt: int) -> float:
        """
        Calculate delay after a failed attempt.

        Args:
            attempt: Failed attempt number (0-indexed)

        Returns:
            Delay in seconds
        """
        delay = self._config.initial_delay * (self._config.exponential_base**attempt)
        return min(delay, self._config.max_delay)

    @property
    def max_attempts(self) -> int:
        """Get total attempts."""
        return self._config.max_attempts
