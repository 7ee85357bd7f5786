"""Tests for the command-line entry point."""

from __future__ import annotations

import sys

import main
import pytest

from burmese_numerals.engine import BurmeseNumeralEngine


class TestConvertArg:
    def test_number_argument(self, capsys) -> None:
        assert main.convert_arg(BurmeseNumeralEngine(), "100,000") is True
        assert "တစ်သိန်း" in capsys.readouterr().out

    def test_burmese_argument(self, capsys) -> None:
        assert main.convert_arg(BurmeseNumeralEngine(), "တစ်သိန်း နှစ်ထောင်") is True
        assert "102,000" in capsys.readouterr().out

    def test_negative_number_fails(self, capsys) -> None:
        assert main.convert_arg(BurmeseNumeralEngine(), "-5") is False
        assert "valid number" in capsys.readouterr().out

    def test_bad_burmese_fails(self, capsys) -> None:
        assert main.convert_arg(BurmeseNumeralEngine(), "banana") is False
        assert "Invalid Burmese number format" in capsys.readouterr().out

    def test_too_many_digits_fails(self, capsys) -> None:
        assert main.convert_arg(BurmeseNumeralEngine(), "1" * 5000) is False
        assert "too large" in capsys.readouterr().out

    def test_too_large_burmese_value_fails(self, capsys) -> None:
        assert main.convert_arg(BurmeseNumeralEngine(), "၁" * 5000) is False
        assert "too large" in capsys.readouterr().out


class TestMain:
    def test_exit_code_zero_on_success(self, monkeypatch) -> None:
        monkeypatch.setattr(sys, "argv", ["main.py", "25", "၁၂၃"])
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 0

    def test_exit_code_one_on_failure(self, monkeypatch) -> None:
        monkeypatch.setattr(sys, "argv", ["main.py", "25", "banana"])
        with pytest.raises(SystemExit) as exc:
            main.main()
        assert exc.value.code == 1
