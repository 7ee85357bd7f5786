"""
Place-value table for the Burmese numeral system.

The table is the ONLY piece of data shared by both conversion directions:
  - the forward converter walks the units largest-first to decompose an integer
  - the reverse parser walks the same units largest-first to consume a phrase

It is immutable and passed in explicitly (no module-level lookups inside the
algorithms), so an alternate table can be swapped in for tests or for another
script variant.

    Magnitude   Word        Reading
    100000      သိန်း       lakh
    10000       သောင်း      ten thousand
    1000        ထောင်       thousand
    100         ရာ          hundred
    10          ဆယ်         ten
    1           (none)      bare units digit
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ─── Script Constants ────────────────────────────────────────────────

# Dot below (U+1037). Appended after ထောင် / ရာ / ဆယ် when a lower term follows.
CONNECTOR = "့"

# Asat (U+103A). Unit words ထောင် and ဆယ် end in it; the connector follows it.
ASAT = "\u103a"

# Classifier used by one page variant to mark the units place ("ခု").
ONES_MARKER = "ခု"

DIGIT_WORDS: tuple[str, ...] = (
    "သုည",
    "တစ်",
    "နှစ်",
    "သုံး",
    "လေး",
    "ငါး",
    "ခြောက်",
    "ခုနစ်",
    "ရှစ်",
    "ကိုး",
)

DIGIT_GLYPHS: tuple[str, ...] = ("၀", "၁", "၂", "၃", "၄", "၅", "၆", "၇", "၈", "၉")


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class Unit:
    """A single place value: magnitude plus the word written after its count."""

    magnitude: int
    word: str  # Empty for the magnitude-1 unit


@dataclass(frozen=True)
class PlaceValueTable:
    """Units ordered largest-first plus the ten digit words and glyphs.

    Invariants are checked at construction; a table that violates them
    would silently assign counts to the wrong place.
    """

    units: tuple[Unit, ...]
    digit_words: tuple[str, ...] = DIGIT_WORDS
    digit_glyphs: tuple[str, ...] = DIGIT_GLYPHS
    connector: str = CONNECTOR
    ones_marker: str = ONES_MARKER
    connector_magnitudes: frozenset[int] = frozenset({1000, 100, 10})

    _word_index: dict[str, int] = field(init=False, repr=False, compare=False)
    _glyph_index: dict[str, int] = field(init=False, repr=False, compare=False)
    _unit_index: dict[int, Unit] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_units(self.units)
        _check_digits(self.digit_words, "digit words")
        _check_digits(self.digit_glyphs, "digit glyphs")

        # Frozen dataclass: indexes are attached through object.__setattr__
        object.__setattr__(
            self, "_word_index", {w: d for d, w in enumerate(self.digit_words)}
        )
        object.__setattr__(
            self, "_glyph_index", {g: d for d, g in enumerate(self.digit_glyphs)}
        )
        object.__setattr__(self, "_unit_index", {u.magnitude: u for u in self.units})

    # ── Units ───────────────────────────────────────────────────────

    def unit_for(self, magnitude: int) -> Unit | None:
        return self._unit_index.get(magnitude)

    def units_descending(self) -> tuple[Unit, ...]:
        return self.units

    @property
    def top_unit(self) -> Unit:
        """The largest unit (lakh). Its count may itself exceed nine."""
        return self.units[0]

    # ── Digits ──────────────────────────────────────────────────────

    @property
    def zero_word(self) -> str:
        return self.digit_words[0]

    def digit_word(self, digit: int) -> str:
        return self.digit_words[digit]

    def digit_glyph(self, digit: int) -> str:
        return self.digit_glyphs[digit]

    def word_to_digit(self, word: str) -> int | None:
        return self._word_index.get(word)

    def glyph_to_digit(self, glyph: str) -> int | None:
        return self._glyph_index.get(glyph)


# ─── Invariant Checks ────────────────────────────────────────────────


def _check_units(units: tuple[Unit, ...]) -> None:
    if len(units) < 2:
        raise ValueError("Place-value table needs a worded unit above the bare units digit")

    magnitudes = [u.magnitude for u in units]
    if len(set(magnitudes)) != len(magnitudes):
        raise ValueError(f"Unit magnitudes must be unique: {magnitudes}")
    if magnitudes != sorted(magnitudes, reverse=True):
        raise ValueError(f"Units must be ordered by descending magnitude: {magnitudes}")

    last = units[-1]
    if last.magnitude != 1 or last.word:
        raise ValueError("The last unit must be the bare magnitude-1 unit")

    for unit in units[:-1]:
        if not unit.word:
            raise ValueError(f"Unit {unit.magnitude} has no word")


def _check_digits(values: tuple[str, ...], label: str) -> None:
    if len(values) != 10:
        raise ValueError(f"Expected 10 {label}, got {len(values)}")
    if len(set(values)) != 10:
        raise ValueError(f"{label.capitalize()} must be distinct")


# ─── Default Table ───────────────────────────────────────────────────

DEFAULT_TABLE = PlaceValueTable(
    units=(
        Unit(100_000, "သိန်း"),
        Unit(10_000, "သောင်း"),
        Unit(1_000, "ထောင်"),
        Unit(100, "ရာ"),
        Unit(10, "ဆယ်"),
        Unit(1, ""),
    )
)
