"""``romanum rules`` — show the symbol table and the active rule set.

Renders a Rich table of the seven symbols, the canonical tokens used for
encoding, and the switches currently in force.  Falls back to a plain
stderr table when Rich is missing.
"""

from __future__ import annotations

import sys

from romanum.cli import exit_codes
from romanum.cli.console import console
from romanum.config import RuleSet
from romanum.core.symbols import SYMBOLS, tokens


# ---------------------------------------------------------------------------
# Row collectors
# ---------------------------------------------------------------------------

def _symbol_rows() -> list[tuple[str, str]]:
    """Return (letter, value) rows for every symbol."""
    return [(symbol.letter, str(symbol.value)) for symbol in SYMBOLS]


def _token_rows() -> list[tuple[str, str]]:
    """Return (letters, value) rows for the encoder's token list."""
    return [(token.letters, str(token.value)) for token in tokens()]


def _rule_rows(rules: RuleSet) -> list[tuple[str, str]]:
    """Return (setting, state) rows describing *rules*."""

    def on_off(flag: bool) -> str:
        return "on" if flag else "off"

    return [
        ("classical mode", on_off(rules.classical_mode)),
        ("relaxed subtraction", on_off(rules.relaxed_subtraction)),
        ("ignore case", on_off(rules.ignore_case)),
        ("range", f"1-{rules.max_value}"),
    ]


def _print_plain_rules(sections: list[tuple[str, list[tuple[str, str]]]]) -> None:
    """Render the tables without Rich."""
    for title, rows in sections:
        print(f"\n{title}", file=sys.stderr)
        print("-" * 32, file=sys.stderr)
        for left, right in rows:
            print(f"{left:<22} {right:>9}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_rules(rules: RuleSet) -> int:
    """Render the symbol table, token list and *rules*.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`.
    """
    sections = [
        ("Symbols", _symbol_rows()),
        ("Tokens", _token_rows()),
        ("Rules", _rule_rows(rules)),
    ]

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_rules(sections)
        return exit_codes.SUCCESS

    for title, rows in sections:
        table = Table(
            title=title,
            show_header=False,
            border_style="dim",
        )
        table.add_column(style="bold", min_width=12)
        table.add_column(justify="right", min_width=8)
        for left, right in rows:
            table.add_row(left, right)
        console.print(table)
    return exit_codes.SUCCESS
