"""Core layer — pure conversion logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All state is local to a call; module-level tables are read-only.
"""

from romanum.core.dispatch import classify, convert
from romanum.core.encoder import ArabicEncoder, encode
from romanum.core.models import (
    ArabicRequest,
    ConversionResult,
    ParsedNumeral,
    RomanRequest,
    Symbol,
    Token,
)
from romanum.core.symbols import tokens, value_of
from romanum.core.validator import RomanValidator, validate

__all__: list[str] = [
    "ArabicEncoder",
    "ArabicRequest",
    "ConversionResult",
    "ParsedNumeral",
    "RomanRequest",
    "RomanValidator",
    "Symbol",
    "Token",
    "classify",
    "convert",
    "encode",
    "tokens",
    "validate",
    "value_of",
]
