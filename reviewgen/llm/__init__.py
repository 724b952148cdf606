"""Generation provider clients."""

from reviewgen.llm.provider import BaseProviderClient

__all__ = ["BaseProviderClient"]
