"""Test provider factory."""

import pytest

from reviewgen.config import AppConfig
from reviewgen.exceptions import ConfigurationError
from reviewgen.llm.anthropic_provider import AnthropicProvider
from reviewgen.llm.factory import ProviderFactory
from reviewgen.llm.groq_provider import GroqProvider
from reviewgen.llm.openai_provider import OpenAIProvider
from reviewgen.models.provider import ProviderConfig


class TestProviderFactory:
    """Test provider creation."""

    def test_should_create_primary_openai(self, test_config):
        """Test primary slot."""
        provider = ProviderFactory(test_config).create_primary()

        assert isinstance(provider, OpenAIProvider)
        assert provider.config.timeout_seconds == 3.0
        assert provider.config.max_retries == 2

    def test_should_create_secondary_groq_by_default(self, test_config):
        """Test default secondary backend."""
        provider = ProviderFactory(test_config).create_secondary()

        assert isinstance(provider, GroqProvider)
        assert provider.config.cost_per_unit == 0.0
        assert provider.config.timeout_seconds == 1.0

    def test_should_create_secondary_anthropic(self):
        """Test selectable secondary backend."""
        config = AppConfig(secondary_provider="anthropic", anthropic_api_key="k")

        provider = ProviderFactory(config).create_secondary()

        assert isinstance(provider, AnthropicProvider)

    def test_should_apply_retry_settings(self, test_config):
        """Test retry handler built from provider retries."""
        provider = ProviderFactory(test_config).create_primary()

        assert provider._retry_handler.max_attempts == 3

    def test_should_reject_unknown_provider(self, test_config):
        """Test invalid backend name."""
        config = ProviderConfig(name="mystery", model="m")

        with pytest.raises(ConfigurationError):
            ProviderFactory(test_config).create(config)
