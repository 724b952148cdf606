"""HTTP API for review generation."""
