"""
Anthropic generation provider implementation.

Sandi Metz Principles:
- Single Responsibility: Anthropic API interaction
- Small methods: Each method does one thing
- Dependency Injection: Configuration injected
"""

from anthropic import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncAnthropic,
    Omit,
)

from reviewgen.exceptions import (
    ProviderError,
    ProviderHTTPError,
    ProviderNetworkError,
    ProviderTimeoutError,
)
from reviewgen.llm.openai_provider import SYSTEM_PROMPT
from reviewgen.llm.provider import BaseProviderClient
from reviewgen.models.result import ProviderResponse
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)


class AnthropicProvider(BaseProviderClient):
    """
    Anthropic implementation of the provider client.

    Maps the messages API response (content blocks, input/output token
    usage) into the common provider response.
    """

    _client: AsyncAnthropic | None = None

    async def _call(self, prompt: str) -> ProviderResponse:
        """
        Make messages API call.

        Args:
            prompt: Prompt text

        Returns:
            Provider response
        """
        client = self._get_client()

        response = await client.messages.create(
            model=self._config.model,
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
            extra_headers=self._auth_headers(),
        )

        text = response.content[0].text if response.content else ""
        units = (
            response.usage.input_tokens + response.usage.output_tokens
            if response.usage
            else 0
        )

        return ProviderResponse(
            text=text, units=units, model=response.model or self._config.model
        )

    def _translate_error(self, error: Exception) -> ProviderError:
        """
        Map Anthropic SDK errors into the provider error taxonomy.

        Args:
            error: SDK exception

        Returns:
            Provider error
        """
        name = self.get_name()

        if isinstance(error, APITimeoutError):
            return ProviderTimeoutError(
                self._build_error_message(error, f"{name} request timed out"),
                provider=name,
            )
        if isinstance(error, APIStatusError):
            return ProviderHTTPError(
                self._build_error_message(error, f"{name} returned an error status"),
                status=error.status_code,
                provider=name,
            )
        if isinstance(error, APIConnectionError):
            return ProviderNetworkError(
                self._build_error_message(error, f"{name} unreachable"),
                provider=name,
            )
        return ProviderError(
            self._build_error_message(error, f"Unexpected error in {name} provider"),
            provider=name,
        )

    def _auth_headers(self) -> dict:
        """Omit the X-Api-Key header when calling keyless through a proxy."""
        if self._config.api_key:
            return {}
        return {"X-Api-Key": Omit()}

    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name
        """
        return "anthropic"

    def _get_client(self) -> AsyncAnthropic:
        """
        Get or create async client.

        Returns:
            Anthropic async client
        """
        if not self._client:
            self._client = AsyncAnthropic(
                api_key=self._config.api_key or None,
                base_url=self._config.endpoint or None,
                timeout=self._config.timeout_seconds,
                max_retries=0,
            )
        return self._client
