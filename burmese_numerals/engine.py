"""
Conversion engine: the two entry points the presentation layer calls.

Flow:
  ┌─────────┐                      ┌──────────────┐
  │ integer │ ── to_numeral_text ─►│ Burmese text │
  └─────────┘                      └──────┬───────┘
       ▲                                  │
       │        parse_numeral_text        │
       └──── ConversionResult ◄───────────┘
                  (value | INVALID_FORMAT finding)

Design principles:
  - The table and the mode are injected at construction, not looked up globally.
  - Both directions share only the place-value table.
  - No exception crosses parse_numeral_text / convert_number; callers get a
    ConversionResult and show its static hint.
  - Stateless after construction: one engine can serve any number of callers.
"""

from __future__ import annotations

import logging

from .config import EngineConfig
from .exceptions import InvalidNumberInput
from .models import ConversionResult
from .number_to_words import number_to_words
from .tables import DEFAULT_TABLE, PlaceValueTable
from .validators import classify_error, validate_numeral_text

logger = logging.getLogger(__name__)


class BurmeseNumeralEngine:
    """Bidirectional Burmese numeral converter.

    Usage:
        engine = BurmeseNumeralEngine()
        engine.to_numeral_text(102000)          # "တစ်သိန်းနှစ်ထောင်"
        result = engine.parse_numeral_text("တစ်သိန်း နှစ်ထောင်")
        if result.ok:
            print(result.value)                 # 102000
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        table: PlaceValueTable = DEFAULT_TABLE,
    ):
        self.config = config or EngineConfig()
        self.table = table
        logger.info(
            "Numeral engine ready (shorthand=%s)", self.config.shorthand_enabled
        )

    @property
    def shorthand_enabled(self) -> bool:
        return self.config.shorthand_enabled

    def to_numeral_text(self, n: int) -> str:
        """Integer → phrase. Raises InvalidNumberInput for negative / non-int n."""
        return number_to_words(n, self.table, shorthand=self.shorthand_enabled)

    def parse_numeral_text(self, text: str) -> ConversionResult:
        """Phrase → ConversionResult (value on success, INVALID_FORMAT otherwise)."""
        return validate_numeral_text(text, self.table)

    def convert_number(self, n: int) -> ConversionResult:
        """Integer → ConversionResult, classifying out-of-contract input."""
        try:
            text = self.to_numeral_text(n)
        except InvalidNumberInput as e:
            logger.debug("Rejected number %s: %s", e.details["value"], e)
            return ConversionResult.failure(classify_error(e, e.details["value"]))
        return ConversionResult.success(n, text)
