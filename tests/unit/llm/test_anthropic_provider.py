"""Test Anthropic provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from anthropic import APIStatusError, Omit

from reviewgen.exceptions import ProviderHTTPError
from reviewgen.llm.anthropic_provider import AnthropicProvider
from reviewgen.llm.openai_provider import SYSTEM_PROMPT
from reviewgen.models.provider import ProviderConfig


def make_config(**overrides) -> ProviderConfig:
    fields = {
        "name": "anthropic",
        "model": "claude-3-haiku-20240307",
        "api_key": "test-api-key",
        "max_retries": 0,
        "temperature": 0.7,
        "max_tokens": 250,
        "timeout_seconds": 1.0,
    }
    fields.update(overrides)
    return ProviderConfig(**fields)


@pytest.fixture
def mock_anthropic_response():
    """Create mock messages API response."""
    mock_response = MagicMock()
    mock_response.content = [MagicMock()]
    mock_response.content[0].text = "Charming and quiet."
    mock_response.usage.input_tokens = 40
    mock_response.usage.output_tokens = 60
    mock_response.model = "claude-3-haiku-20240307"
    return mock_response


class TestAnthropicProvider:
    """Test Anthropic provider implementation."""

    def test_should_get_provider_name(self):
        """Test getting provider name."""
        assert AnthropicProvider(make_config()).get_name() == "anthropic"

    @pytest.mark.asyncio
    async def test_should_map_response(self, sample_request, mock_anthropic_response):
        """Test content blocks and usage map into the provider response."""
        provider = AnthropicProvider(make_config())

        with patch(
            "reviewgen.llm.anthropic_provider.AsyncAnthropic"
        ) as mock_client_class:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=mock_anthropic_response)
            mock_client_class.return_value = mock_client

            response = await provider.generate(sample_request)

            assert response.text == "Charming and quiet."
            assert response.units == 100
            kwargs = mock_client.messages.create.call_args.kwargs
            assert kwargs["system"] == SYSTEM_PROMPT
            assert kwargs["max_tokens"] == 250
            assert kwargs["extra_headers"] == {}

    @pytest.mark.asyncio
    async def test_should_omit_key_header_behind_proxy(
        self, sample_request, mock_anthropic_response
    ):
        """Test proxied calls strip the key header."""
        provider = AnthropicProvider(
            make_config(api_key="", proxied=True, endpoint="https://proxy.local/anthropic")
        )

        with patch(
            "reviewgen.llm.anthropic_provider.AsyncAnthropic"
        ) as mock_client_class:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=mock_anthropic_response)
            mock_client_class.return_value = mock_client

            await provider.generate(sample_request)

            headers = mock_client.messages.create.call_args.kwargs["extra_headers"]
            assert isinstance(headers["X-Api-Key"], Omit)
            assert mock_client_class.call_args.kwargs["base_url"] == (
                "https://proxy.local/anthropic"
            )

    @pytest.mark.asyncio
    async def test_should_translate_status_error(self, sample_request):
        """Test SDK status error becomes provider HTTP error."""
        provider = AnthropicProvider(make_config())
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        error = APIStatusError(
            "overloaded", response=httpx.Response(529, request=request), body=None
        )

        with patch(
            "reviewgen.llm.anthropic_provider.AsyncAnthropic"
        ) as mock_client_class:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(side_effect=error)
            mock_client_class.return_value = mock_client

            with pytest.raises(ProviderHTTPError) as exc_info:
                await provider.generate(sample_request)

            assert exc_info.value.status == 529
