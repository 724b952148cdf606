"""Request-level experiments."""

from reviewgen.experiments.ab_assigner import ARM_LLM, ARM_TEMPLATE, ABAssigner

__all__ = ["ABAssigner", "ARM_LLM", "ARM_TEMPLATE"]
