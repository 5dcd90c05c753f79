"""Tests for the symbol table and token list (core/symbols.py)."""

from __future__ import annotations

import pytest

from romanum.core.symbols import SYMBOLS, TOKENS, VALUES, tokens, value_of
from romanum.exceptions import UnknownSymbolError


class TestValueOf:
    @pytest.mark.parametrize(
        ("letter", "value"),
        [
            ("I", 1),
            ("V", 5),
            ("X", 10),
            ("L", 50),
            ("C", 100),
            ("D", 500),
            ("M", 1000),
        ],
    )
    def test_known_letters(self, letter: str, value: int) -> None:
        assert value_of(letter) == value

    @pytest.mark.parametrize("letter", ["i", "A", "", "IV", "Ⅻ"])
    def test_unknown_letters(self, letter: str) -> None:
        with pytest.raises(UnknownSymbolError):
            value_of(letter)


class TestTables:
    def test_seven_symbols(self) -> None:
        assert [s.letter for s in SYMBOLS] == list("IVXLCDM")

    def test_values_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            VALUES["Z"] = 2000  # type: ignore[index]

    def test_tokens_descend(self) -> None:
        values = [t.value for t in tokens()]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_canonical_token_set(self) -> None:
        assert [t.letters for t in TOKENS] == [
            "M", "CM", "D", "CD", "C", "XC", "L", "XL", "X", "IX", "V", "IV", "I",
        ]

    def test_two_letter_tokens_are_differences(self) -> None:
        for token in TOKENS:
            if len(token.letters) == 2:
                small, large = (value_of(ch) for ch in token.letters)
                assert token.value == large - small

    def test_tokens_is_stable(self) -> None:
        assert tokens() is tokens()
