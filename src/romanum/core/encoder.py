"""Arabic -> Roman conversion by greedy token covering.

The token list (``M``, ``CM``, ``D`` ... ``IV``, ``I``) is a complete
canonical covering of the supported range, so taking the largest token
that still fits at every step always yields the unique canonical
spelling.
"""

from __future__ import annotations

import logging

from romanum.config import DEFAULT_RULES, RuleSet
from romanum.core.symbols import tokens
from romanum.exceptions import OutOfRangeError

logger = logging.getLogger(__name__)


class ArabicEncoder:
    """Stateless encoder bound to one :class:`RuleSet`."""

    def __init__(self, rules: RuleSet = DEFAULT_RULES) -> None:
        self._rules: RuleSet = rules

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def encode(self, value: int) -> str:
        """Return the canonical Roman spelling of *value*.

        Raises
        ------
        OutOfRangeError
            If *value* is not an integer between 1 and the rule set's
            :attr:`~romanum.config.RuleSet.max_value`.
        """
        upper = self._rules.max_value
        if isinstance(value, bool) or not isinstance(value, int):
            raise OutOfRangeError(
                f"Expected an integer, got {type(value).__name__}.",
            )
        if not 1 <= value <= upper:
            hint = None
            if value > upper and not self._rules.classical_mode:
                hint = "Classical mode (--classical) extends the range to 4999."
            raise OutOfRangeError(
                f"The value should be between 1 and {upper} inclusive, not {value}.",
                hint=hint,
            )

        remaining = value
        parts: list[str] = []
        for token in tokens():
            while remaining >= token.value:
                parts.append(token.letters)
                remaining -= token.value

        result = "".join(parts)
        logger.debug("encoded %d as %s", value, result)
        return result


def encode(value: int, rules: RuleSet = DEFAULT_RULES) -> str:
    """Convenience wrapper: ``ArabicEncoder(rules).encode(value)``."""
    return ArabicEncoder(rules).encode(value)
