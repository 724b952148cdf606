"""
Generation provider base class and interface.

Sandi Metz Principles:
- Single Responsibility: Provider abstraction
- Interface Segregation: Minimal provider interface
- Dependency Inversion: Depend on abstraction, not concrete classes
"""

from abc import ABC, abstractmethod

from reviewgen.exceptions import ProviderError, ProviderResponseError
from reviewgen.llm.prompt_builder import PromptBuilder
from reviewgen.llm.retry import RetryConfig, RetryHandler
from reviewgen.llm.timeout_handler import TimeoutConfig, TimeoutHandler
from reviewgen.models.provider import ProviderConfig
from reviewgen.models.request import GenerationRequest
from reviewgen.models.result import ProviderResponse
from reviewgen.utils.logger import get_logger, log_provider_call

logger = get_logger(__name__)


class BaseProviderClient(ABC):
    """
    Abstract base class for generation providers.

    Runs each attempt under the configured deadline and retries
    failed attempts with exponential backoff. Subclasses only make
    the vendor call and translate vendor errors.
    """

    def __init__(
        self,
        config: ProviderConfig,
        retry_handler: RetryHandler | None = None,
        timeout_handler: TimeoutHandler | None = None,
        prompt_builder: PromptBuilder | None = None,
    ):
        """
        Initialize provider.

        Args:
            config: Static provider configuration
            retry_handler: Optional retry handler (built from config if None)
            timeout_handler: Optional timeout handler (built from config if None)
            prompt_builder: Optional prompt builder
        """
        self._config = config
        self._retry_handler = retry_handler or RetryHandler(
            RetryConfig(max_retries=config.max_retries)
        )
        self._timeout_handler = timeout_handler or TimeoutHandler(
            TimeoutConfig(timeout_seconds=config.timeout_seconds),
            provider=config.name,
        )
        self._prompt_builder = prompt_builder or PromptBuilder()

    async def generate(self, request: GenerationRequest) -> ProviderResponse:
        """
        Generate review text for request.

        Args:
            request: Generation request

        Returns:
            Provider response with text and usage units

        Raises:
            ProviderError: If every attempt fails
        """
        prompt = self._prompt_builder.build(request)
        return await self._retry_handler.execute(lambda: self._attempt(prompt))

    async def _attempt(self, prompt: str) -> ProviderResponse:
        """
        Make one deadline-bound call.

        Args:
            prompt: Prompt text

        Returns:
            Provider response
        """
        try:
            response = await self._timeout_handler.execute(
                lambda: self._call(prompt), timeout_seconds=self._config.timeout_seconds
            )
        except ProviderError:
            raise
        except Exception as e:
            logger.warning("Provider call failed", provider=self.get_name(), error=str(e))
            raise self._translate_error(e) from e

        if not response.text.strip():
            raise ProviderResponseError(
                f"{self.get_name()} returned empty content", provider=self.get_name()
            )

        log_provider_call(
            provider=self.get_name(), model=response.model, units=response.units
        )
        return response

    @abstractmethod
    async def _call(self, prompt: str) -> ProviderResponse:
        """
        Make the vendor API call.

        Args:
            prompt: Prompt text

        Returns:
            Provider response
        """
        pass

    @abstractmethod
    def _translate_error(self, error: Exception) -> ProviderError:
        """
        Map a vendor exception into the provider error taxonomy.

        Args:
            error: Vendor exception

        Returns:
            Matching provider error
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name (e.g., "openai", "groq")
        """
        pass

    @property
    def config(self) -> ProviderConfig:
        """Get provider configuration."""
        return self._config

    def is_available(self) -> bool:
        """
        Check if the provider can be called.

        A provider is callable with an API key, or keyless behind a proxy
        endpoint that handles auth.

        Returns:
            True if calls can be attempted
        """
        return self._config.is_callable

    def _build_error_message(self, error: Exception, context: str) -> str:
        """
        Build error message with context.

        Args:
            error: The exception that occurred
            context: Context description

        Returns:
            Formatted error message
        """
        return f"{context}: {type(error).__name__} - {str(error)}"
