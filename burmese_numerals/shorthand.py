"""
Colloquial shorthand for round multiples of one, ten and one hundred million.

Spoken Burmese says "lakh twenty" rather than "twenty lakh" for these values:

    2,000,000    → သိန်းနှစ်ဆယ်     (lakh + two + ten)
    30,000,000   → သိန်းသုံးရာ      (lakh + three + hundred)
    500,000,000  → သိန်းငါးထောင်    (lakh + five + thousand)

Only exact multiples inside each range qualify; anything else falls through to
the regular decomposition. This form is write-only: the reverse parser does
not read it back.
"""

from __future__ import annotations

from .tables import DEFAULT_TABLE, PlaceValueTable

# (lowest value, highest value, step, magnitude of the trailing unit word)
_SHORTHAND_RANGES: tuple[tuple[int, int, int, int], ...] = (
    (2_000_000, 9_000_000, 1_000_000, 10),
    (10_000_000, 90_000_000, 10_000_000, 100),
    (100_000_000, 900_000_000, 100_000_000, 1_000),
)


def try_shorthand(n: int, table: PlaceValueTable = DEFAULT_TABLE) -> str | None:
    """Return the shorthand phrase for n, or None if n is not a shorthand value."""
    for low, high, step, magnitude in _SHORTHAND_RANGES:
        if low <= n <= high and n % step == 0:
            unit = table.unit_for(magnitude)
            if unit is None:
                return None
            return table.top_unit.word + table.digit_word(n // step) + unit.word
    return None
