"""The Roman symbol table and canonical token list.

Both are built once at import time and never mutated, so they can be
read from any thread without coordination.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from romanum.core.models import Symbol, Token
from romanum.exceptions import UnknownSymbolError

SYMBOLS: tuple[Symbol, ...] = (
    Symbol("I", 1),
    Symbol("V", 5),
    Symbol("X", 10),
    Symbol("L", 50),
    Symbol("C", 100),
    Symbol("D", 500),
    Symbol("M", 1000),
)

VALUES: Mapping[str, int] = MappingProxyType(
    {symbol.letter: symbol.value for symbol in SYMBOLS}
)

TOKENS: tuple[Token, ...] = (
    Token("M", 1000),
    Token("CM", 900),
    Token("D", 500),
    Token("CD", 400),
    Token("C", 100),
    Token("XC", 90),
    Token("L", 50),
    Token("XL", 40),
    Token("X", 10),
    Token("IX", 9),
    Token("V", 5),
    Token("IV", 4),
    Token("I", 1),
)

# Values that may lead a subtractive pair, and those that may never repeat.
SUBTRACTIVE_LEADS: frozenset[int] = frozenset({1, 10, 100})
FIVES: frozenset[int] = frozenset({5, 50, 500})


def value_of(letter: str) -> int:
    """Return the Arabic value of a single upper-case Roman *letter*.

    Raises
    ------
    UnknownSymbolError
        If *letter* is not one of I, V, X, L, C, D, M.
    """
    try:
        return VALUES[letter]
    except KeyError:
        raise UnknownSymbolError(f"Unknown Roman symbol: {letter!r}") from None


def tokens() -> tuple[Token, ...]:
    """Canonical tokens in descending value order."""
    return TOKENS
