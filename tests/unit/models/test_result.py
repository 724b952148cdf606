"""Test generation result and provider config models."""

import pytest
from pydantic import ValidationError

from reviewgen.models.provider import ProviderConfig
from reviewgen.models.result import GenerationResult, GenerationSource


class TestGenerationResult:
    """Test result model."""

    def test_should_serialize_source_value(self):
        """Test enum serialization."""
        result = GenerationResult(
            text="Nice", source=GenerationSource.TEMPLATE, latency_ms=1.0, request_id="r"
        )

        assert result.model_dump(mode="json")["source"] == "template"

    def test_should_reject_empty_text(self):
        """Test non-empty text."""
        with pytest.raises(ValidationError):
            GenerationResult(
                text="", source=GenerationSource.CACHE, latency_ms=1.0, request_id="r"
            )

    @pytest.mark.parametrize(
        "source,expected",
        [
            (GenerationSource.PRIMARY, True),
            (GenerationSource.SECONDARY, True),
            (GenerationSource.CACHE, False),
            (GenerationSource.EMERGENCY, False),
        ],
    )
    def test_from_provider(self, source, expected):
        """Test provider source detection."""
        result = GenerationResult(text="x", source=source, latency_ms=0, request_id="r")

        assert result.from_provider is expected


class TestProviderConfig:
    """Test provider configuration model."""

    def test_should_be_callable_with_key(self):
        """Test key makes provider callable."""
        config = ProviderConfig(name="openai", model="gpt-4o-mini", api_key="k")

        assert config.is_callable

    def test_should_be_callable_keyless_behind_proxy(self):
        """Test proxy makes provider callable without key."""
        config = ProviderConfig(name="openai", model="gpt-4o-mini", proxied=True)

        assert config.is_callable
        assert not config.has_credentials

    def test_should_not_be_callable_without_key_or_proxy(self):
        """Test unconfigured provider."""
        config = ProviderConfig(name="openai", model="gpt-4o-mini")

        assert not config.is_callable

    def test_should_reject_blank_model(self):
        """Test model validation."""
        with pytest.raises(ValidationError):
            ProviderConfig(name="openai", model="  ")
