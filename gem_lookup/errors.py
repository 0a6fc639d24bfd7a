"""Exception taxonomy for gem lookups."""

from __future__ import annotations


class GemLookupError(Exception):
    """Base exception for gem_lookup errors."""


class EmptyInputError(GemLookupError):
    """Raised when no gem names remain after normalisation."""

    def __init__(self, message: str = "No gem names were given") -> None:
        super().__init__(message)


class DateParseError(GemLookupError, ValueError):
    """Raised when a release timestamp cannot be parsed."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unable to parse date: {value!r}")


class DecodeError(GemLookupError, ValueError):
    """Raised when a successful response body is not a JSON object."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid JSON body for {name}: {reason}")


__all__ = ["DateParseError", "DecodeError", "EmptyInputError", "GemLookupError"]
