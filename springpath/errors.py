"""Error types raised for invalid user input."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A parameter or a row attribute violates a shape constraint."""
