"""
Custom exceptions for the application.
"""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    pass


class ProviderError(AppError):
    """Raised when a generation provider fails."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class ProviderTimeoutError(ProviderError):
    """Raised when a provider call exceeds its deadline."""

    pass


class ProviderHTTPError(ProviderError):
    """Raised when a provider answers with a non-success status."""

    def __init__(self, message: str, status: int, provider: Optional[str] = None):
        super().__init__(message, provider=provider)
        self.status = status


class ProviderNetworkError(ProviderError):
    """Raised when a provider cannot be reached."""

    pass


class ProviderResponseError(ProviderError):
    """Raised when a provider response has no usable text."""

    pass


class ComposerError(AppError):
    """Raised when the template composer fails."""

    pass


class ConfigurationError(AppError):
    """Raised when configuration is invalid."""

    pass


class MetricsStoreError(AppError):
    """Raised when metrics cannot be loaded or saved."""

    pass
