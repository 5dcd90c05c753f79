"""Route raw user input to the validator or the encoder.

Input that reads as a base-10 integer is an :class:`ArabicRequest`;
everything else is a :class:`RomanRequest`.  The two variants are
matched structurally, never by inspecting the raw string twice.
"""

from __future__ import annotations

import re

from romanum.config import DEFAULT_RULES, RuleSet
from romanum.core.encoder import ArabicEncoder
from romanum.core.models import (
    ArabicRequest,
    ConversionRequest,
    ConversionResult,
    RomanRequest,
)
from romanum.core.validator import RomanValidator
from romanum.exceptions import OutOfRangeError

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_DIGITS = 18


def classify(raw: str) -> ConversionRequest:
    """Decide which conversion *raw* asks for.

    Raises
    ------
    OutOfRangeError
        For an integer with more significant digits than any supported
        range could need.
    """
    if _INTEGER.fullmatch(raw):
        digits = raw.lstrip("+-").lstrip("0")
        if len(digits) > _MAX_DIGITS:
            raise OutOfRangeError(
                f"A {len(digits)}-digit number is far outside the Roman range.",
            )
        return ArabicRequest(value=int(raw))
    return RomanRequest(text=raw)


def convert(
    request: ConversionRequest, rules: RuleSet = DEFAULT_RULES,
) -> ConversionResult:
    """Run the conversion *request* describes.

    Raises
    ------
    ValidationError
        For a Roman request that is not a well-formed numeral.
    OutOfRangeError
        For an Arabic request outside the supported range.
    """
    match request:
        case ArabicRequest(value=value):
            output = ArabicEncoder(rules).encode(value)
        case RomanRequest(text=text):
            output = str(RomanValidator(rules).validate(text))
    return ConversionResult(request=request, output=output)
