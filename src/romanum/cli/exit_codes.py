"""Exit-code constants used by the CLI layer.

Every exit path goes through one of these names so that scripts calling
``romanum`` can tell a rejected numeral from a crash.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Conversion printed on stdout."""

GENERAL_ERROR: int = 1
"""Input rejected (invalid numeral, value out of range, bad setting)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
