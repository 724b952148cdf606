"""
Structured logging configuration.

Following Sandi Metz principles:
- Single Responsibility: Logging setup and configuration
- Small functions: Each setup step isolated
- Clear naming: Descriptive function names
"""

import logging
import sys
from typing import Any

import structlog


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared_processors,
        )
    )
    logging.basicConfig(
        handlers=[handler],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)


def bind_request_id(request_id: str) -> None:
    """
    Bind request id to every log line emitted in the current context.

    Args:
        request_id: Request identifier
    """
    structlog.contextvars.bind_contextvars(request_id=request_id)


def unbind_request_id() -> None:
    """Remove the request id from the logging context."""
    structlog.contextvars.unbind_contextvars("request_id")


def log_cache_hit(fingerprint: str, **kwargs: Any) -> None:
    """
    Log cache hit.

    Args:
        fingerprint: Cache key
        **kwargs: Additional context
    """
    logger = get_logger("cache")
    logger.info("cache_hit", fingerprint=fingerprint, **kwargs)


def log_cache_miss(fingerprint: str, **kwargs: Any) -> None:
    """
    Log cache miss.

    Args:
        fingerprint: Cache key
        **kwargs: Additional context
    """
    logger = get_logger("cache")
    logger.info("cache_miss", fingerprint=fingerprint, **kwargs)


def log_provider_call(provider: str, model: str, units: int, **kwargs: Any) -> None:
    """
    Log generation provider call.

    Args:
        provider: Provider name
        model: Model name
        units: Usage units (tokens) reported by the backend
        **kwargs: Additional context
    """
    logger = get_logger("llm")
    logger.info("provider_call", provider=provider, model=model, units=units, **kwargs)


def log_alert(alert_type: str, message: str, **kwargs: Any) -> None:
    """
    Log threshold alert.

    Args:
        alert_type: Alert type (error_rate, latency, cost)
        message: Alert message
        **kwargs: Additional context
    """
    logger = get_logger("alerts")
    logger.warning("alert", alert_type=alert_type, message=message, **kwargs)


def log_error(error: Exception, context: str, **kwargs: Any) -> None:
    """
    Log error with context.

    Args:
        error: Exception that occurred
        context: Error context
        **kwargs: Additional context
    """
    logger = get_logger("error")
    logger.error(
        "error_occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context,
        **kwargs
    )
