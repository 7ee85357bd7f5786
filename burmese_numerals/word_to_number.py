"""
Convert a Burmese numeral phrase back to its integer value.

Supported patterns:
    "သုည"                                → 0
    "တစ်သိန်း နှစ်ထောင်"                 → 102,000
    "သိန်း"                              → 100,000   (a bare unit word means one of it)
    "သုံးထောင့်လေးရာ့ငါးဆယ့်ခြောက်"      → 3,456
    "တစ်ဆယ်သိန်း"                        → 1,000,000 (compound lakh count)
    "တစ်သိန်းသိန်း"                      → 10**10    (lakh of lakhs)
    "ငါးခု"                              → 5         (explicit units classifier)
    "၁၂၃"                                → 123       (raw digit glyphs)

Algorithm:
    For each unit except the bare units digit, largest first:
    - find the first Burmese run containing the unit word
    - the count phrase is whatever precedes the word's last occurrence in
      that run (empty → one)
    - consume the word, an optional connector and trailing whitespace
    - add count * magnitude, splice the match out, re-trim

    Whatever is left must be a single digit word, a digit word followed by
    the units classifier, or a run of digit glyphs. Anything else is an
    InvalidFormat carrying the unconsumed text.

    The lakh count may itself contain lakh words. It is split on them into
    base-lakh limbs, each limb is read with the lower units only, and the
    limbs are combined left to right (count = count * 100000 + limb). Deep
    nesting therefore costs one pass over the phrase, not one call level
    per lakh word.

Each unit is consumed at most once. A repeated unit word is left in the
residual (or swallowed into a count phrase) and the parse fails; the only
exception is the lakh, whose count may itself be a lakh phrase.
"""

from __future__ import annotations

from .exceptions import InvalidFormat
from .tables import ASAT, DEFAULT_TABLE, PlaceValueTable, Unit
from .tokenizer import TokenKind, normalize_whitespace, tokenize

# ─── Main Converter ─────────────────────────────────────────────────


def words_to_number(text: str, table: PlaceValueTable = DEFAULT_TABLE) -> int:
    """Convert a Burmese numeral phrase to an int.

    Args:
        text: e.g. "တစ်သိန်း နှစ်ထောင်"
        table: Place-value table the phrase was written with.

    Returns:
        102000

    Raises:
        InvalidFormat: If the text is empty or cannot be fully consumed.
    """
    if not text or not text.strip():
        raise InvalidFormat(text or "", "Empty text cannot be converted to a number")

    clean = normalize_whitespace(_normalize_marks(text, table))
    if clean == table.zero_word:
        return 0

    total = 0

    top = table.top_unit
    match = _find_unit(clean, top, table)
    if match is not None:
        count_phrase, start, end = match
        total += _resolve_top_count(count_phrase, table) * top.magnitude
        clean = (clean[:start] + clean[end:]).strip()

    return total + _consume_lower_units(clean, table)


def _consume_lower_units(text: str, table: PlaceValueTable) -> int:
    """Read every unit below the lakh, then the residual. Empty text is zero."""
    total = 0

    for unit in table.units_descending()[1:]:
        if unit.magnitude == 1:
            continue

        match = _find_unit(text, unit, table)
        if match is None:
            continue

        count_phrase, start, end = match
        total += _resolve_count(count_phrase, unit, table) * unit.magnitude
        text = (text[:start] + text[end:]).strip()

    if text:
        total += _resolve_residual(text, table)

    return total


# ─── Matching ────────────────────────────────────────────────────────


def _normalize_marks(text: str, table: PlaceValueTable) -> str:
    """Put the connector after the asat ("ထောင့်" typed either way reads the same)."""
    return text.replace(table.connector + ASAT, ASAT + table.connector)


def _find_unit(
    text: str, unit: Unit, table: PlaceValueTable
) -> tuple[str, int, int] | None:
    """Locate the first occurrence of a unit and its count phrase.

    Returns:
        (count_phrase, match_start, match_end) or None if the unit is absent.
        The match spans the count phrase, the unit word, an optional
        connector and any whitespace that follows.
    """
    for token in tokenize(text):
        if token.kind is not TokenKind.BURMESE:
            continue

        pos = token.text.rfind(unit.word)
        if pos == -1:
            continue

        end = token.start + pos + len(unit.word)
        if text.startswith(table.connector, end):
            end += len(table.connector)
        while end < len(text) and text[end].isspace():
            end += 1

        return token.text[:pos], token.start, end

    return None


# ─── Count / Residual Resolution ─────────────────────────────────────


def _resolve_count(phrase: str, unit: Unit, table: PlaceValueTable) -> int:
    """Turn the words before a lower unit into its count."""
    if not phrase:
        return 1  # A bare unit word means one of it

    digit = table.word_to_digit(phrase)
    if digit is not None:
        return digit

    raise InvalidFormat(
        phrase,
        f"Unrecognized count {phrase!r} before {unit.word!r}",
        {"unit": unit.word},
    )


def _resolve_top_count(phrase: str, table: PlaceValueTable) -> int:
    """Count of the lakh: "တစ်ဆယ်" → 10, "နှစ်သိန်းငါး" → 200005.

    A leading empty limb is an elided one ("သိန်းသိန်း" → 100000); later
    empty limbs are zero.
    """
    top = table.top_unit
    head, *limbs = phrase.split(top.word)

    try:
        count = _consume_lower_units(head, table) if head else 1
        for limb in limbs:
            if limb.startswith(table.connector):
                limb = limb[len(table.connector):]
            count = count * top.magnitude + _consume_lower_units(limb, table)
    except InvalidFormat as e:
        raise InvalidFormat(
            phrase,
            f"Unrecognized count {phrase!r} before {top.word!r}",
            {"unit": top.word, "cause": e.residual_text},
        ) from e

    return count


def _resolve_residual(residual: str, table: PlaceValueTable) -> int:
    """Interpret whatever no unit word consumed."""
    digit = table.word_to_digit(residual)
    if digit is not None:
        return digit

    if residual.endswith(table.ones_marker):
        prefix = residual[: -len(table.ones_marker)].strip()
        if not prefix:
            return 1
        digit = table.word_to_digit(prefix)
        if digit is not None:
            return digit
        raise InvalidFormat(residual, f"Unrecognized count {prefix!r} before the units classifier")

    digits = [table.glyph_to_digit(ch) for ch in residual]
    if any(d is None for d in digits):
        raise InvalidFormat(residual)

    value = 0
    for d in digits:
        value = value * 10 + d  # type: ignore[operator]
    return value
