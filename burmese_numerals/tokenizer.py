"""
Script-range tokenizer for Burmese numeral text.

Groups code points into maximal runs by class:
  - BURMESE: the Myanmar block U+1000-U+109F (letters, digit glyphs, the
             connector mark). A numeral phrase like "တစ်သိန်း" is one run.
  - SPACE:   any Unicode whitespace
  - OTHER:   everything else (Latin letters, punctuation, ...)

The reverse parser only ever needs the BURMESE runs and their offsets, so
this is all the "lexing" it does. No regular expressions are involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MYANMAR_BLOCK = (0x1000, 0x109F)


class TokenKind(str, Enum):
    BURMESE = "BURMESE"
    SPACE = "SPACE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    start: int  # Offset of the first code point in the source string

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def is_burmese(ch: str) -> bool:
    return MYANMAR_BLOCK[0] <= ord(ch) <= MYANMAR_BLOCK[1]


def classify(ch: str) -> TokenKind:
    if is_burmese(ch):
        return TokenKind.BURMESE
    if ch.isspace():
        return TokenKind.SPACE
    return TokenKind.OTHER


def tokenize(text: str) -> list[Token]:
    """Split text into maximal same-class runs.

    Example:
        "တစ်သိန်း ၂၃" → [BURMESE "တစ်သိန်း", SPACE " ", BURMESE "၂၃"]
    """
    tokens: list[Token] = []
    start = 0

    for i in range(1, len(text) + 1):
        if i == len(text) or classify(text[i]) != classify(text[start]):
            tokens.append(Token(classify(text[start]), text[start:i], start))
            start = i

    return tokens


def normalize_whitespace(text: str) -> str:
    """Trim and collapse every whitespace run to a single space."""
    return " ".join(text.split())
