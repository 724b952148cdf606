"""
OpenAI generation provider implementation.

Sandi Metz Principles:
- Single Responsibility: OpenAI API interaction
- Small methods: Each method does one thing
- Dependency Injection: Configuration injected
"""

from typing import Any, Dict, List

from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from reviewgen.exceptions import (
    ProviderError,
    ProviderHTTPError,
    ProviderNetworkError,
    ProviderTimeoutError,
)
from reviewgen.llm.provider import BaseProviderClient
from reviewgen.models.result import ProviderResponse
from reviewgen.utils.logger import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a hotel review writer. "
    "Create authentic, natural-sounding reviews."
)


class OpenAIProvider(BaseProviderClient):
    """
    OpenAI implementation of the provider client.

    Speaks the chat completions wire format. Sends a bearer token when an
    API key is configured; behind a proxy the key is empty and the
    Authorization header is omitted.
    """

    _client: AsyncOpenAI | None = None

    async def _call(self, prompt: str) -> ProviderResponse:
        """
        Make chat completions call.

        Args:
            prompt: Prompt text

        Returns:
            Provider response
        """
        client = self._get_client()

        response = await client.chat.completions.create(
            model=self._config.model,
            messages=self._build_messages(prompt),
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            **self._extra_params(),
        )

        return ProviderResponse(
            text=response.choices[0].message.content or "",
            units=response.usage.total_tokens if response.usage else 0,
            model=response.model or self._config.model,
        )

    def _build_messages(self, prompt: str) -> List[Dict[str, str]]:
        """
        Build messages array.

        Args:
            prompt: Prompt text

        Returns:
            List of message dicts with role and content
        """
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def _extra_params(self) -> Dict[str, Any]:
        """Get backend-specific sampling parameters."""
        return {"presence_penalty": 0.6, "frequency_penalty": 0.3}

    def _translate_error(self, error: Exception) -> ProviderError:
        """
        Map OpenAI SDK errors into the provider error taxonomy.

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

    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name
        """
        return "openai"

    def _get_client(self) -> AsyncOpenAI:
        """
        Get or create async client.

        SDK-level retries are disabled; retry and deadline are owned
        by this client.

        Returns:
            OpenAI async client
        """
        if not self._client:
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.endpoint or None,
                timeout=self._config.timeout_seconds,
                max_retries=0,
            )
        return self._client
