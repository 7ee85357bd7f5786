"""
Engine configuration.

One switch today: whether the forward converter emits the colloquial shorthand
for round multiples of a million. Read from the environment so the API and the
CLI can flip it without code changes:

    BURMESE_NUMERALS_SHORTHAND=1 uvicorn api:app
"""

from __future__ import annotations

import os

from pydantic import BaseModel

SHORTHAND_ENV_VAR = "BURMESE_NUMERALS_SHORTHAND"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


class EngineConfig(BaseModel):
    """Conversion mode, fixed when the engine is constructed."""

    model_config = {"frozen": True}

    shorthand_enabled: bool = False

    @classmethod
    def from_env(cls) -> EngineConfig:
        raw = os.environ.get(SHORTHAND_ENV_VAR, "")
        return cls(shorthand_enabled=raw.strip().lower() in _TRUTHY)
