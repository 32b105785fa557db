"""Error hierarchy for the coverage model.

`InvalidConfiguration` also subclasses `ValueError` so callers that only
know about the builtin still catch malformed input.
"""

from __future__ import annotations


class CoverageModelError(Exception):
    """Base error for coverage model operations."""


class InvalidConfiguration(CoverageModelError, ValueError):
    """Simulation parameters are malformed (non-finite, negative, non-integral)."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class UnknownConfigKey(InvalidConfiguration):
    """Config mapping carries a key the model does not recognise."""

    def __init__(self, key: str) -> None:
        super().__init__(key, None, "unknown configuration key")
