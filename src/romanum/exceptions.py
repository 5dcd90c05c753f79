"""Custom exception hierarchy for romanum.

Every failure the converter can report is a subclass of
:class:`RomanumError`.  The core raises them at the point of violation;
only the CLI error boundary catches them.

Hierarchy
---------
RomanumError
├── ValidationError
│   ├── EmptyInputError
│   ├── InvalidCharacterError
│   ├── DoubleSubtractionError
│   ├── InvalidSubtractivePairError
│   ├── RepeatedLVError
│   ├── TooManyRepeatsError
│   ├── NonCanonicalFormError
│   ├── DescendingOrderError
│   └── OutOfRangeError  (also an EncodingError)
├── EncodingError
├── UnknownSymbolError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class RomanumError(Exception):
    """Base exception for all romanum errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Roman -> Arabic -------------------------------------------------------

class ValidationError(RomanumError):
    """Raised when a Roman numeral string is not well formed."""

    kind: str = "Invalid"

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.position: int | None = position
        """Zero-based index of the offending symbol, when known."""


class EmptyInputError(ValidationError):
    """Raised when the numeral string is empty."""

    kind = "EmptyInput"


class InvalidCharacterError(ValidationError):
    """Raised when a character is not one of I, V, X, L, C, D, M."""

    kind = "InvalidCharacter"


class DoubleSubtractionError(ValidationError):
    """Raised for two subtractions in a row, e.g. ``IXC``."""

    kind = "DoubleSubtraction"


class InvalidSubtractivePairError(ValidationError):
    """Raised when a smaller symbol may not precede the larger one."""

    kind = "InvalidSubtractivePair"


class RepeatedLVError(ValidationError):
    """Raised when V, L or D appears twice in a row."""

    kind = "RepeatedLV"


class TooManyRepeatsError(ValidationError):
    """Raised when a symbol repeats beyond its run limit."""

    kind = "TooManyRepeats"


class NonCanonicalFormError(ValidationError):
    """Raised when a shorter spelling with a higher symbol exists."""

    kind = "NonCanonicalForm"


class DescendingOrderError(ValidationError):
    """Raised when symbols are not in descending order of value."""

    kind = "DescendingOrderViolation"


# --- Arabic -> Roman -------------------------------------------------------

class EncodingError(RomanumError):
    """Raised when an integer cannot be written as a Roman numeral."""


class OutOfRangeError(ValidationError, EncodingError):
    """Raised when a value falls outside the supported magnitude range."""

    kind = "OutOfRange"


# --- Symbol table ----------------------------------------------------------

class UnknownSymbolError(RomanumError):
    """Raised when a letter is not in the symbol table."""


# --- Configuration / environment -------------------------------------------

class ConfigurationError(RomanumError):
    """Raised when an environment setting cannot be interpreted."""


class EnvironmentError(RomanumError):
    """Raised when a required runtime dependency is not available."""
