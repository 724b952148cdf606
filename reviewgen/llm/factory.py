"""
Generation provider factory.

Sandi Metz Principles:
- Single Responsibility: Create provider instances
- Open/Closed: Adding a vendor means adding a creator
- Dependency Inversion: Returns interface, not concrete class
"""

from typing import Callable, Dict

from reviewgen.config import AppConfig, config
from reviewgen.exceptions import ConfigurationError
from reviewgen.llm.anthropic_provider import AnthropicProvider
from reviewgen.llm.groq_provider import GroqProvider
from reviewgen.llm.openai_provider import OpenAIProvider
from reviewgen.llm.provider import BaseProviderClient
from reviewgen.llm.retry import RetryConfig, RetryHandler
from reviewgen.models.provider import ProviderConfig
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

ProviderClass = Callable[..., BaseProviderClient]


class ProviderFactory:
    """
    Factory for creating provider clients.

    Creates the implementation matching the configured backend name.
    """

    CREATORS: Dict[str, ProviderClass] = {
        "openai": OpenAIProvider,
        "groq": GroqProvider,
        "anthropic": AnthropicProvider,
    }

    def __init__(self, app_config: AppConfig | None = None):
        """
        Initialize factory.

        Args:
            app_config: Application configuration (global config if None)
        """
        self._app_config = app_config or config

    def create(self, provider_config: ProviderConfig) -> BaseProviderClient:
        """
        Create provider client.

        Args:
            provider_config: Static provider configuration

        Returns:
            Provider client instance

        Raises:
            ConfigurationError: If the backend name is unknown
        """
        creator = self.CREATORS.get(provider_config.name.lower())
        if not creator:
            valid = ", ".join(self.CREATORS.keys())
            raise ConfigurationError(
                f"Invalid provider: {provider_config.name}. Valid providers: {valid}"
            )

        provider = creator(provider_config, retry_handler=self._retry_handler(provider_config))
        logger.info(
            f"Created {provider_config.name} provider",
            model=provider_config.model,
            available=provider.is_available(),
        )
        return provider

    def create_primary(self) -> BaseProviderClient:
        """Create the primary slot provider."""
        return self.create(self._app_config.primary_provider_config())

    def create_secondary(self) -> BaseProviderClient:
        """Create the secondary slot provider."""
        return self.create(self._app_config.secondary_provider_config())

    def _retry_handler(self, provider_config: ProviderConfig) -> RetryHandler:
        """Build retry handler from provider retries and global backoff."""
        return RetryHandler(
            RetryConfig(
                max_retries=provider_config.max_retries,
                initial_delay=self._app_config.retry_initial_delay,
                max_delay=self._app_config.retry_max_delay,
                exponential_base=self._app_config.retry_exponential_base,
            )
        )
