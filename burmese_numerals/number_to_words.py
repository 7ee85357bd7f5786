"""
Convert a non-negative integer to its Burmese numeral phrase.

Supported patterns:
    0         → သုည
    100000    → တစ်သိန်း
    102000    → တစ်သိန်းနှစ်ထောင်
    123456    → တစ်သိန်းနှစ်သောင်းသုံးထောင့်လေးရာ့ငါးဆယ့်ခြောက်
    1000000   → တစ်ဆယ်သိန်း          (ten lakh)
    10**10    → တစ်သိန်းသိန်း         (lakh of lakhs)

Algorithm:
    Split n into base-lakh limbs, most significant first. The lakh has no
    unit above it, so a count of ten lakh or more is itself written as a
    lakh phrase; laying the limbs side by side with one lakh word between
    each pair produces exactly that nesting without recursing on n.

    Each limb is walked flat, largest unit first. For each unit of magnitude m:
    - count = remaining // m; skip the unit if the count is zero
    - counts 1-9 use the digit word
    - append the unit word, except for the bare units digit
    - append the connector after thousand / hundred / ten if any lower
      term is still to come
    - remaining %= m

    A zero limb contributes nothing, so 10**10 + 5 reads "တစ်" သိန်း "" သိန်း "ငါး".
"""

from __future__ import annotations

import logging

from .exceptions import InvalidNumberInput
from .shorthand import try_shorthand
from .tables import DEFAULT_TABLE, PlaceValueTable

logger = logging.getLogger(__name__)


def number_to_words(
    n: int, table: PlaceValueTable = DEFAULT_TABLE, shorthand: bool = False
) -> str:
    """Convert n to a Burmese numeral phrase.

    Args:
        n: A non-negative integer.
        table: Place-value table to decompose with.
        shorthand: Emit the colloquial form for round multiples of a million.

    Raises:
        InvalidNumberInput: If n is negative or not an int (caller contract).
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidNumberInput(n)

    if n == 0:
        return table.zero_word

    if shorthand:
        phrase = try_shorthand(n, table)
        if phrase is not None:
            logger.debug("Shorthand form used for %d", n)
            return phrase

    return _decompose(n, table)


def _decompose(n: int, table: PlaceValueTable) -> str:
    """Lay n out as base-lakh limbs, one lakh word between neighbours.

    12 * 10**10 + 3 * 10**5 + 7 → limbs [12, 3, 7]
                                → "တစ်ဆယ့်နှစ်" သိန်း "သုံး" သိန်း "ခုနစ်"
    """
    top = table.top_unit
    limbs: list[int] = []
    while n:
        n, limb = divmod(n, top.magnitude)
        limbs.append(limb)
    limbs.reverse()

    parts = [_decompose_limb(limbs[0], table)]
    for limb in limbs[1:]:
        parts.append(top.word)
        if limb and top.magnitude in table.connector_magnitudes:
            parts.append(table.connector)
        parts.append(_decompose_limb(limb, table))

    return "".join(parts)


def _decompose_limb(n: int, table: PlaceValueTable) -> str:
    """Flat unit walk for 0 <= n < top magnitude (zero → "")."""
    parts: list[str] = []
    remaining = n

    for unit in table.units_descending()[1:]:
        count = remaining // unit.magnitude
        if count == 0:
            continue

        if count <= 9:
            parts.append(table.digit_word(count))
        else:
            # Only reachable for tables with a gap between unit magnitudes
            parts.append(_decompose_limb(count, table))

        parts.append(unit.word)

        remaining %= unit.magnitude
        if remaining and unit.magnitude in table.connector_magnitudes:
            parts.append(table.connector)

    return "".join(parts)
