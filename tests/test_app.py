"""Tests for the CLI conversion path and error boundary (cli/app.py).

Coverage:
* Results land on stdout, one line, nothing else.
* Every rejected numeral surfaces as "Invalid sequence".
* ``--explain`` names the broken rule.
* Rule flags and environment variables both reach the core.
* ``cli()`` maps outcomes to exit codes.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from romanum.cli import exit_codes
from romanum.cli.app import INVALID_SEQUENCE, cli, main
from romanum.exceptions import ConfigurationError, OutOfRangeError, RomanumError


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestConvert:
    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["XLII"], "42"),
            (["1999"], "MCMXCIX"),
            (["IIII"], "4"),
            (["4000", "--classical"], "MMMM"),
            (["IC", "--relaxed"], "99"),
            (["iv", "--ignore-case"], "4"),
        ],
    )
    def test_result_on_stdout(
        self,
        argv: list[str],
        expected: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(argv)
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == f"{expected}\n"

    @pytest.mark.parametrize("numeral", ["IXC", "CCCC", "LL", "LC", "IC", "", "abc"])
    def test_rejection_is_invalid_sequence(self, numeral: str) -> None:
        with pytest.raises(RomanumError) as exc_info:
            main([numeral])
        assert str(exc_info.value) == INVALID_SEQUENCE
        assert exc_info.value.hint is None

    def test_explain_names_the_rule(self) -> None:
        with pytest.raises(RomanumError) as exc_info:
            main(["IXC", "--explain"])
        hint = exc_info.value.hint
        assert hint is not None
        assert hint.startswith("DoubleSubtraction (position 3)")

    def test_explain_includes_rule_hint(self) -> None:
        with pytest.raises(RomanumError) as exc_info:
            main(["IC", "--explain"])
        hint = exc_info.value.hint
        assert hint is not None
        assert "InvalidSubtractivePair" in hint
        assert "IV, IX, XL, XC, CD and CM" in hint

    def test_arabic_out_of_range_keeps_its_message(self) -> None:
        with pytest.raises(OutOfRangeError, match="between 1 and 3999"):
            main(["4000"])

    def test_negative_number_is_arabic(self) -> None:
        with pytest.raises(OutOfRangeError):
            main(["-5"])

    def test_environment_rules(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("ROMANUM_CLASSICAL", "1")
        assert main(["MMMM"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "4000\n"

    def test_bad_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROMANUM_CLASSICAL", "maybe")
        with pytest.raises(ConfigurationError):
            main(["X"])

    def test_verbose_logs_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-v", "X"]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out == "10\n"
        assert "accepted" in captured.err

    def test_quiet_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["X"])
        assert capsys.readouterr().err == ""


class TestRulesCommand:
    def test_rules_listing(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["rules", "--classical"]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "1-4999" in captured.err


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
        monkeypatch.setattr(sys, "argv", ["romanum", *args])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code  # type: ignore[return-value]

    def test_success(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert self._run(monkeypatch, "MMXXV") == exit_codes.SUCCESS
        assert capsys.readouterr().out == "2025\n"

    def test_invalid_sequence(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert self._run(monkeypatch, "IXC") == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid sequence" in captured.err

    def test_hint_is_printed(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert self._run(monkeypatch, "CCCC", "--explain") == exit_codes.GENERAL_ERROR
        assert "TooManyRepeats" in capsys.readouterr().err

    def test_huge_integer_is_a_range_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert self._run(monkeypatch, "9" * 5000) == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "5000-digit number" in captured.err
        assert "Unexpected error" not in captured.err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with patch("romanum.cli.app.main", side_effect=KeyboardInterrupt):
            assert self._run(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("romanum.cli.app.main", side_effect=RuntimeError("boom")):
            assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError" in capsys.readouterr().err
