"""Roman numeral validation and Roman -> Arabic conversion.

A numeral is read in a single left-to-right pass with one symbol of
look-ahead.  A symbol followed by a larger one forms a *subtractive
pair* and both are consumed together; any other symbol is *additive*.
Every rule is local to the current unit and a handful of counters kept
in :class:`~romanum.core.models.ParsedNumeral`, so no backtracking is
ever needed.

Rules enforced (see :class:`~romanum.config.RuleSet` for the switches)
----------------------------------------------------------------------
* Only I, V, X, L, C, D, M.
* No two subtractions in a row (``IXC``).
* Only I, X, C may be subtracted, and only from the next two symbols up
  (``IV``, ``IX``, ``XL``, ``XC``, ``CD``, ``CM``) unless relaxed.
* V, L, D never repeat.
* I, X, C, M repeat at most three times; four in classical mode, and
  the lone watch-face ``IIII`` is always accepted.
* Nothing that a higher symbol spells shorter (``LC``, ``VIV``).
* Values never rise outside a subtractive pair.
"""

from __future__ import annotations

import logging
import string

from romanum.config import DEFAULT_RULES, RuleSet
from romanum.core.models import ParsedNumeral
from romanum.core.symbols import FIVES, SUBTRACTIVE_LEADS, SYMBOLS, VALUES
from romanum.exceptions import (
    DescendingOrderError,
    DoubleSubtractionError,
    EmptyInputError,
    InvalidCharacterError,
    InvalidSubtractivePairError,
    NonCanonicalFormError,
    OutOfRangeError,
    RepeatedLVError,
    TooManyRepeatsError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_LETTERS: dict[int, str] = {symbol.value: symbol.letter for symbol in SYMBOLS}
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class RomanValidator:
    """Stateless validator bound to one :class:`RuleSet`.

    Instances hold nothing but the immutable rule set, so a single
    validator may be shared freely across threads.
    """

    def __init__(self, rules: RuleSet = DEFAULT_RULES) -> None:
        self._rules: RuleSet = rules

    @property
    def rules(self) -> RuleSet:
        return self._rules

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, text: str) -> int:
        """Validate *text* and return its Arabic value.

        Raises
        ------
        ValidationError
            The subclass names the first rule *text* breaks.
        """
        try:
            numeral = self._normalise(text)
            state = ParsedNumeral()
            index = 0
            while index < len(numeral):
                value = VALUES[numeral[index]]
                following = (
                    VALUES[numeral[index + 1]] if index + 1 < len(numeral) else 0
                )
                if value < following:
                    self._take_pair(state, value, following, index)
                    index += 2
                else:
                    self._take_single(
                        state, value, index, last=index + 1 == len(numeral),
                    )
                    index += 1
            self._check_range(state.total)
        except ValidationError as exc:
            logger.debug(
                "rejected %r: %s at position %s", text, exc.kind, exc.position,
            )
            raise

        logger.debug("accepted %r as %d", text, state.total)
        return state.total

    # ------------------------------------------------------------------
    # Input screening
    # ------------------------------------------------------------------

    def _normalise(self, text: str) -> str:
        """Reject empty or foreign input; fold case when allowed."""
        if not text:
            raise EmptyInputError("Empty input is not a Roman numeral.")
        if self._rules.ignore_case:
            text = text.translate(_ASCII_UPPER)
        for position, char in enumerate(text):
            if char not in VALUES:
                hint = None
                if char.translate(_ASCII_UPPER) in VALUES:
                    hint = "Lower-case numerals need --ignore-case."
                raise InvalidCharacterError(
                    f"{char!r} is not a Roman numeral symbol.",
                    position=position,
                    hint=hint,
                )
        return text

    # ------------------------------------------------------------------
    # Scan steps
    # ------------------------------------------------------------------

    def _take_pair(
        self, state: ParsedNumeral, value: int, following: int, index: int,
    ) -> None:
        """Consume the subtractive pair starting at *index*."""
        pair = _LETTERS[value] + _LETTERS[following]

        if state.last_was_subtractive and value > state.prev_value:
            raise DoubleSubtractionError(
                f"{pair} subtracts from a symbol that was itself subtracted.",
                position=index,
            )
        if following - value == value:
            raise NonCanonicalFormError(
                f"{pair} is just {_LETTERS[value]}.",
                position=index,
            )
        if not self._is_legal_pair(value, following):
            raise InvalidSubtractivePairError(
                f"{_LETTERS[value]} cannot be subtracted from {_LETTERS[following]}.",
                position=index,
                hint="Only IV, IX, XL, XC, CD and CM are subtractive pairs.",
            )

        pair_value = following - value
        if state.last_was_subtractive:
            if pair_value >= state.subtrahend:
                raise DescendingOrderError(
                    f"{pair} must be smaller than the pair before it.",
                    position=index,
                )
        elif state.prev_value:
            if following > state.prev_value:
                raise DescendingOrderError(
                    f"{pair} is larger than the symbol before it.",
                    position=index,
                )
            if following == state.prev_value and following in FIVES:
                raise NonCanonicalFormError(
                    f"{_LETTERS[following]}{pair} should be written "
                    f"{_LETTERS[value]}{_LETTERS[following * 2]}.",
                    position=index - 1,
                )

        state.total += pair_value
        state.prev_value = following
        state.subtrahend = value
        state.last_was_subtractive = True
        state.run_length = 0

    def _take_single(
        self, state: ParsedNumeral, value: int, index: int, *, last: bool,
    ) -> None:
        """Consume the additive symbol at *index*; *last* if nothing follows."""
        letter = _LETTERS[value]

        if state.last_was_subtractive:
            if value > state.prev_value:
                raise DoubleSubtractionError(
                    f"Two subtractions in a row before {letter}.",
                    position=index,
                )
            if value >= state.subtrahend:
                raise DescendingOrderError(
                    f"{letter} cannot follow a pair that subtracts "
                    f"{_LETTERS[state.subtrahend]}.",
                    position=index,
                )
            state.run_length = 1
        elif value == state.prev_value:
            state.run_length += 1
            if value in FIVES:
                raise RepeatedLVError(
                    f"{letter} may not be repeated.",
                    position=index,
                    hint=f"{letter}{letter} is {_LETTERS[value * 2]}.",
                )
            # A run reaching index 3 started at 0; with *last* it is the whole numeral.
            limit = self._run_limit(value, whole_numeral=index == 3 and last)
            if state.run_length > limit:
                hint = None
                if value == 1 and limit == 3:
                    hint = "IIII is only accepted on its own, as 4."
                raise TooManyRepeatsError(
                    f"{letter} repeats more than {limit} times.",
                    position=index,
                    hint=hint,
                )
        else:
            state.run_length = 1

        state.total += value
        state.prev_value = value
        state.last_was_subtractive = False
        state.subtrahend = 0

    # ------------------------------------------------------------------
    # Rule tables
    # ------------------------------------------------------------------

    def _is_legal_pair(self, value: int, following: int) -> bool:
        if value not in SUBTRACTIVE_LEADS:
            return False
        if self._rules.relaxed_subtraction:
            return True
        return following in (value * 5, value * 10)

    def _run_limit(self, value: int, *, whole_numeral: bool) -> int:
        """Longest legal run of *value*; V, L and D are handled separately.

        Outside classical mode the watch-face ``IIII`` is the only run of
        four, and only when it makes up the entire numeral.
        """
        if self._rules.classical_mode:
            return 4
        if value == 1 and whole_numeral:
            return 4
        return 3

    def _check_range(self, total: int) -> None:
        if not 1 <= total <= self._rules.max_value:
            raise OutOfRangeError(
                f"{total} is outside 1-{self._rules.max_value}.",
            )


def validate(text: str, rules: RuleSet = DEFAULT_RULES) -> int:
    """Convenience wrapper: ``RomanValidator(rules).validate(text)``."""
    return RomanValidator(rules).validate(text)
