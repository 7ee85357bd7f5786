"""
Custom exception hierarchy for numeral conversion.

Each exception type maps to one failure category with a machine-readable code,
so the validator can turn it into a ConversionFinding without string matching.
"""

from __future__ import annotations

# Ints longer than this are described by size; repr() of very long ints is refused
_REPR_MAX_BITS = 4_000


class NumeralError(ValueError):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidFormat(NumeralError):
    """A Burmese numeral phrase could not be fully consumed by the parser."""

    def __init__(self, residual_text: str, message: str | None = None, details: dict | None = None):
        self.residual_text = residual_text
        merged = {"residual_text": residual_text, **(details or {})}
        super().__init__(
            "INVALID_FORMAT",
            message or f"Invalid Burmese number format: {residual_text!r}",
            merged,
        )


class InvalidNumberInput(NumeralError):
    """The plain-integer side is outside the converter's contract (negative, non-integer, not digits)."""

    _code = "INVALID_NUMBER_INPUT"

    def __init__(self, value: object, message: str | None = None):
        self.value = value
        shown = _describe(value)
        super().__init__(
            self._code,
            message or f"Expected a non-negative integer, got {shown}",
            {"value": shown},
        )


class NumberTooLarge(InvalidNumberInput):
    """A value has more digits than the caller layer will display or accept."""

    _code = "NUMBER_TOO_LARGE"


def _describe(value: object) -> str:
    if isinstance(value, int) and value.bit_length() > _REPR_MAX_BITS:
        return f"<{value.bit_length()}-bit integer>"
    return value if isinstance(value, str) else repr(value)
