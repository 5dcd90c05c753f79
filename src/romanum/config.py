"""Rule-set configuration for romanum.

The converter accepts one of several rule interpretations.  They are
captured in a frozen :class:`RuleSet` so that a single value can be
passed to the validator and the encoder and shared across threads.

Environment Variables:
    ROMANUM_CLASSICAL: "1" to allow four X/C/M in a row (range 1-4999)
    ROMANUM_RELAXED_SUBTRACTION: "1" to accept pairs such as IC or XM
    ROMANUM_IGNORE_CASE: "1" to accept lower-case numerals
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from romanum.exceptions import ConfigurationError

MODERN_MAX_VALUE: int = 3999
"""Largest value representable with at most three M's."""

CLASSICAL_MAX_VALUE: int = 4999
"""Largest value representable with four M's."""

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Which composition rules the validator and encoder enforce."""

    classical_mode: bool = False
    """Allow four consecutive X, C or M and additive nines such as VIIII."""

    relaxed_subtraction: bool = False
    """Allow I, X and C to precede *any* larger symbol (IC = 99)."""

    ignore_case: bool = False
    """Fold lower-case input to upper case before validation."""

    @property
    def max_value(self) -> int:
        return CLASSICAL_MAX_VALUE if self.classical_mode else MODERN_MAX_VALUE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RuleSet:
        """Build a rule set from ``ROMANUM_*`` environment variables.

        Raises
        ------
        ConfigurationError
            If a variable holds something other than a boolean word.
        """
        env = os.environ if environ is None else environ
        return cls(
            classical_mode=_read_flag(env, "ROMANUM_CLASSICAL"),
            relaxed_subtraction=_read_flag(env, "ROMANUM_RELAXED_SUBTRACTION"),
            ignore_case=_read_flag(env, "ROMANUM_IGNORE_CASE"),
        )


DEFAULT_RULES = RuleSet()


def _read_flag(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ConfigurationError(
        f"Cannot interpret {name}={env[name]!r} as a boolean.",
        hint="Use 1/0, true/false, yes/no or on/off.",
    )
