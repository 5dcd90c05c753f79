"""Domain models for romanum.

Symbols, tokens, requests and results are **frozen** dataclasses:
immutable value objects with no behaviour beyond data access.  The only
mutable model is :class:`ParsedNumeral`, the scratch state of a single
validation scan, which is created and discarded inside one call.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Symbol table entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Symbol:
    """One of the seven Roman letters."""

    letter: str
    """Upper-case ASCII letter (``I``, ``V``, ``X``, ``L``, ``C``, ``D``, ``M``)."""

    value: int
    """Arabic value of the letter."""


@dataclass(frozen=True, slots=True)
class Token:
    """A one- or two-letter canonical spelling used by the encoder."""

    letters: str
    value: int


# ---------------------------------------------------------------------------
# Scan state
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class ParsedNumeral:
    """Running state of a left-to-right validation scan.

    Never shared between calls; one instance lives for exactly one
    :meth:`~romanum.core.validator.RomanValidator.validate` call.
    """

    total: int = 0
    """Arabic value accumulated so far."""

    prev_value: int = 0
    """Value of the last symbol consumed (larger half after a pair), 0 at start."""

    run_length: int = 0
    """Count of consecutive identical additive symbols ending at ``prev_value``."""

    last_was_subtractive: bool = False
    """Whether the previous step consumed a subtractive pair."""

    subtrahend: int = 0
    """Smaller half of the last subtractive pair, 0 if none."""


# ---------------------------------------------------------------------------
# Dispatch: a two-variant tagged union
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ArabicRequest:
    """Raw input that parsed as a base-10 integer."""

    value: int


@dataclass(frozen=True, slots=True)
class RomanRequest:
    """Raw input to be validated as a Roman numeral."""

    text: str


ConversionRequest = ArabicRequest | RomanRequest


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a successful conversion."""

    request: ConversionRequest
    output: str
    """Text to show the user: the Roman spelling or the decimal value."""
