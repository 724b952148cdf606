"""
Usage cost calculator for generation providers.

Sandi Metz Principles:
- Single Responsibility: Calculate API costs
- Small methods: Each method does one thing
"""

# Rough estimate used when the backend reports no usage
CHARS_PER_TOKEN = 4


class CostCalculator:
    """
    Calculate costs for provider usage.

    Prices are expressed per 1K usage units (tokens).
    """

    def __init__(self, cost_per_unit: float):
        """
        Initialize calculator.

        Args:
            cost_per_unit: USD per 1K units
        """
        self._cost_per_unit = cost_per_unit

    def calculate(self, units: int) -> float:
        """
        Calculate cost for reported usage.

        Args:
            units: Usage units (total tokens)

        Returns:
            Cost in USD
        """
        return (units / 1000) * self._cost_per_unit

    def estimate_from_text(self, text: str) -> float:
        """
        Estimate cost from generated text length.

        Args:
            text: Generated text

        Returns:
            Estimated cost in USD
        """
        return self.calculate(len(text) / CHARS_PER_TOKEN)

    def estimate(self, units: int, text: str) -> float:
        """
        Cost from reported units, falling back to a text estimate.

        Args:
            units: Usage units (0 when unreported)
            text: Generated text

        Returns:
            Cost in USD
        """
        if units > 0:
            return self.calculate(units)
        return self.estimate_from_text(text)

    @property
    def cost_per_unit(self) -> float:
        """Get USD per 1K units."""
        return self._cost_per_unit
