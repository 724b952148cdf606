"""ReviewGen: hotel review generation with provider fallback."""

__version__ = "0.1.0"
