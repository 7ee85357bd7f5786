"""
Pydantic models for conversion results.

The engine never lets an exception cross its boundary: every call returns a
ConversionResult holding either the converted value or a classified finding.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

# ─── Error Kinds ────────────────────────────────────────────────────


class ErrorKind(str, Enum):
    """Classification of a failed conversion."""

    INVALID_FORMAT = "INVALID_FORMAT"  # Burmese text the parser could not consume
    INVALID_NUMBER_INPUT = "INVALID_NUMBER_INPUT"  # Caller passed a bad plain number
    NUMBER_TOO_LARGE = "NUMBER_TOO_LARGE"  # Value past the display limit


# ─── Finding ────────────────────────────────────────────────────────


class ConversionFinding(BaseModel):
    """Why a conversion failed, with the offending text for display."""

    kind: ErrorKind
    message: str  # Static, user-facing hint
    offending_text: str
    details: dict = Field(default_factory=dict)


# ─── Result ─────────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Outcome of one conversion: value and phrase on success, a finding on failure."""

    value: Optional[int] = None
    text: Optional[str] = None
    error: Optional[ConversionFinding] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: int, text: str) -> ConversionResult:
        return cls(value=value, text=text)

    @classmethod
    def failure(cls, finding: ConversionFinding) -> ConversionResult:
        return cls(error=finding)
