"""
A/B experiment gate.

Sandi Metz Principles:
- Single Responsibility: Decide the experiment arm for one request
- Dependency Injection: Random source injected for testability
"""

import random
from typing import Callable

ARM_LLM = "llm"
ARM_TEMPLATE = "template"


class ABAssigner:
    """
    Probabilistic gate between provider generation and templates.

    Every call draws independently; assignment is not sticky.
    """

    def __init__(
        self,
        llm_percentage: float = 50.0,
        random_source: Callable[[], float] = random.random,
    ):
        """
        Initialize assigner.

        Args:
            llm_percentage: Share of requests (0-100) allowed to reach providers
            random_source: Uniform draw in [0, 1)
        """
        if not 0.0 <= llm_percentage <= 100.0:
            raise ValueError("LLM percentage must be between 0 and 100")

        self._percentage = llm_percentage
        self._random = random_source

    def should_use_provider(self) -> bool:
        """
        Draw the arm for one request.

        Returns:
            True when the request may reach the providers
        """
        return self._random() * 100 < self._percentage

    def assign(self) -> str:
        """Draw and name the arm for one request."""
        return ARM_LLM if self.should_use_provider() else ARM_TEMPLATE

    @property
    def llm_percentage(self) -> float:
        """Get share of requests allowed to reach providers."""
        return self._percentage
