"""
Validation and error classification at the engine boundary.

The parser raises; these functions catch and classify. Each one:
  - takes the raw caller input
  - returns a value or a ConversionResult (never leaks a NumeralError
    from validate_numeral_text)
  - is independently testable

Also hosts the caller-side checks the presentation layer needs before it can
call the converter: plain-digit input filtering and grouped display. Both
refuse values longer than MAX_DISPLAY_DIGITS digits, which the converter
itself handles but which cannot be shown as a decimal string.
"""

from __future__ import annotations

import logging
import re

from .exceptions import InvalidFormat, InvalidNumberInput, NumberTooLarge, NumeralError
from .models import ConversionFinding, ConversionResult, ErrorKind
from .tables import DEFAULT_TABLE, PlaceValueTable
from .word_to_number import words_to_number

logger = logging.getLogger(__name__)


# ─── Static Hint Messages ────────────────────────────────────────────

INVALID_FORMAT_HINT = "Invalid Burmese number format (e.g., တစ်သိန်း နှစ်ထောင်)"
INVALID_NUMBER_HINT = "Please enter a valid number (e.g., 100,000)"
NUMBER_TOO_LARGE_HINT = "Number is too large to display (at most 4,000 digits)"

# Below the interpreter's default int/str conversion limit of 4,300 digits
MAX_DISPLAY_DIGITS = 4_000
_DISPLAY_LIMIT = 10**MAX_DISPLAY_DIGITS

_STANDARD_INPUT = re.compile(r"^[0-9,]+$")


# ─── Burmese Text → Result ───────────────────────────────────────────


def validate_numeral_text(
    text: str, table: PlaceValueTable = DEFAULT_TABLE
) -> ConversionResult:
    """Parse a Burmese numeral phrase, classifying any failure as INVALID_FORMAT."""
    try:
        value = words_to_number(text, table)
    except InvalidFormat as e:
        logger.debug("Rejected numeral text %r: %s", text, e)
        return ConversionResult.failure(classify_error(e, text))

    return ConversionResult.success(value, text)


def classify_error(error: NumeralError, original_text: str) -> ConversionFinding:
    """Map an exception from the core to a user-facing finding."""
    if isinstance(error, NumberTooLarge):
        kind, hint = ErrorKind.NUMBER_TOO_LARGE, NUMBER_TOO_LARGE_HINT
    elif isinstance(error, InvalidNumberInput):
        kind, hint = ErrorKind.INVALID_NUMBER_INPUT, INVALID_NUMBER_HINT
    else:
        kind, hint = ErrorKind.INVALID_FORMAT, INVALID_FORMAT_HINT

    return ConversionFinding(
        kind=kind,
        message=hint,
        offending_text=original_text,
        details={"code": error.code, "reason": error.message, **error.details},
    )


# ─── Plain-Digit Side ────────────────────────────────────────────────


def parse_standard_input(raw: str) -> int:
    """Accept digits and ',' group separators only: "1,250,000" → 1250000.

    Raises:
        NumberTooLarge: More than MAX_DISPLAY_DIGITS significant digits.
        InvalidNumberInput: On anything else (signs, decimals, letters, empty).
    """
    value = raw.strip()
    digits = value.replace(",", "")
    if not _STANDARD_INPUT.match(value) or not digits:
        raise InvalidNumberInput(raw, INVALID_NUMBER_HINT)
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DISPLAY_DIGITS:
        raise NumberTooLarge(raw, NUMBER_TOO_LARGE_HINT)

    try:
        return int(significant)
    except ValueError as e:
        # The interpreter's own int/str digit limit may be set lower than ours
        raise NumberTooLarge(raw, NUMBER_TOO_LARGE_HINT) from e


def format_grouped(n: int) -> str:
    """Display form of the plain-integer side: 1250000 → "1,250,000".

    Raises:
        NumberTooLarge: If n has more than MAX_DISPLAY_DIGITS digits.
    """
    if abs(n) >= _DISPLAY_LIMIT:
        raise NumberTooLarge(n, NUMBER_TOO_LARGE_HINT)
    try:
        return f"{n:,}"
    except ValueError as e:
        raise NumberTooLarge(n, NUMBER_TOO_LARGE_HINT) from e
