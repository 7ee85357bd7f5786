#!/usr/bin/env python3
"""
Burmese Numerals — Entry Point
==============================

Converts each argument in whichever direction its characters suggest:
plain digits (with optional ',' separators) become Burmese words, anything
else is parsed as Burmese numeral text.

Usage:
    python main.py                              # Demo table
    python main.py 102,000 "တစ်သိန်း နှစ်ထောင်"   # Convert arguments
    BURMESE_NUMERALS_SHORTHAND=1 python main.py 2000000
    LOG_LEVEL=DEBUG python main.py ...
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from burmese_numerals.config import EngineConfig
from burmese_numerals.engine import BurmeseNumeralEngine
from burmese_numerals.exceptions import InvalidNumberInput, NumberTooLarge
from burmese_numerals.validators import (
    classify_error,
    format_grouped,
    parse_standard_input,
)

load_dotenv()


# ─── Demo Inputs ────────────────────────────────────────────────────

DEMO_INPUTS = [
    "0",
    "7",
    "25",
    "100,000",
    "123,456",
    "2,000,000",
    "12,345,678",
    "သုည",
    "တစ်သိန်း နှစ်ထောင်",
    "သုံးထောင့်လေးရာ့ငါးဆယ့်ခြောက်",
    "၁၂၃",
    "ငါးခု",
    "တစ်ထောင် နှစ်ထောင်",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Conversion ─────────────────────────────────────────────────────


def _looks_numeric(arg: str) -> bool:
    stripped = arg.replace(",", "").strip()
    return bool(stripped) and stripped.isascii() and stripped.lstrip("-").isdigit()


def _clip(arg: str, width: int = 24) -> str:
    return arg if len(arg) <= width else arg[: width - 1] + "…"


def convert_arg(engine: BurmeseNumeralEngine, arg: str) -> bool:
    """Convert and print one argument. Returns False if the conversion failed."""
    if _looks_numeric(arg):
        try:
            n = parse_standard_input(arg)
        except InvalidNumberInput as e:
            print(f"  {_RED}{_clip(arg):<24}{_RESET} {classify_error(e, arg).message}")
            return False
        print(f"  {format_grouped(n):>24} {_DIM}→{_RESET} {_BOLD}{engine.to_numeral_text(n)}{_RESET}")
        return True

    result = engine.parse_numeral_text(arg)
    if result.error is not None:
        print(f"  {_RED}{arg:<24}{_RESET} {result.error.message}")
        return False

    try:
        formatted = format_grouped(result.value)
    except NumberTooLarge as e:
        print(f"  {_RED}{_clip(arg):<24}{_RESET} {classify_error(e, arg).message}")
        return False

    print(f"  {arg:>24} {_DIM}→{_RESET} {_BOLD}{formatted}{_RESET}")
    return True


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Convert command-line arguments (or the demo inputs) and print the results."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())

    engine = BurmeseNumeralEngine(EngineConfig.from_env())
    inputs = sys.argv[1:] or DEMO_INPUTS

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  BURMESE NUMERALS{_RESET}  {_DIM}(shorthand: {engine.shorthand_enabled}){_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = sum(1 for arg in inputs if not convert_arg(engine, arg))

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} input(s) could not be converted{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}All inputs converted{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
