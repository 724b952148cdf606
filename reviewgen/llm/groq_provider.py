"""
Groq generation provider implementation.

Groq exposes an OpenAI-compatible chat completions API, so the OpenAI
SDK is reused with a different base URL and message layout.
"""

from typing import Any, Dict, List

from reviewgen.llm.openai_provider import OpenAIProvider


class GroqProvider(OpenAIProvider):
    """Groq implementation of the provider client."""

    def _build_messages(self, prompt: str) -> List[Dict[str, str]]:
        """Single user message, no system prompt."""
        return [{"role": "user", "content": f"Write a natural hotel review. {prompt}"}]

    def _extra_params(self) -> Dict[str, Any]:
        """Get backend-specific parameters."""
        return {"stream": False}

    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name
        """
        return "groq"
