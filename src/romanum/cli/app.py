"""CLI application entry point and command routing for romanum.

This module is the **sole error boundary** for the entire application.
It catches :class:`~romanum.exceptions.RomanumError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here; all work is delegated to ``core``.
* Results go to stdout; every diagnostic goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys

from romanum.cli import exit_codes
from romanum.cli.console import configure_logging, console
from romanum.config import RuleSet
from romanum.exceptions import RomanumError, ValidationError
from romanum.version import __version__

INVALID_SEQUENCE: str = "Invalid sequence"
"""The single user-facing message for every rejected numeral."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``romanum <numeral|integer>`` — convert in whichever direction fits
    * ``romanum rules``             — show symbols, tokens and active rules
    * ``romanum --version``
    """
    parser = argparse.ArgumentParser(
        prog="romanum",
        description="Convert between Roman numerals and Arabic integers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Roman numeral or integer to convert, or 'rules'.",
    )
    parser.add_argument(
        "--classical",
        action="store_true",
        help="Allow four X, C or M in a row (range 1-4999).",
    )
    parser.add_argument(
        "--relaxed",
        action="store_true",
        help="Accept subtractive pairs such as IC, IL or XM.",
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Accept lower-case numerals.",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Say which rule a rejected numeral breaks.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each conversion step to stderr.",
    )
    return parser


def _resolve_rules(args: argparse.Namespace) -> RuleSet:
    """Environment settings, with command-line flags switched on top."""
    rules = RuleSet.from_env()
    return dataclasses.replace(
        rules,
        classical_mode=rules.classical_mode or args.classical,
        relaxed_subtraction=rules.relaxed_subtraction or args.relaxed,
        ignore_case=rules.ignore_case or args.ignore_case,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _explain(exc: ValidationError) -> str:
    """One-line description of which rule *exc* reports."""
    where = f" (position {exc.position + 1})" if exc.position is not None else ""
    lines = [f"{exc.kind}{where}: {exc}"]
    if exc.hint:
        lines.append(exc.hint)
    return "\n".join(lines)


def _handle_convert(raw: str, rules: RuleSet, *, explain: bool) -> int:
    """Convert *raw* and print the result on stdout."""
    from romanum.core.dispatch import classify, convert
    from romanum.core.models import ArabicRequest

    request = classify(raw)
    try:
        result = convert(request, rules)
    except ValidationError as exc:
        if isinstance(request, ArabicRequest):
            raise
        raise RomanumError(
            INVALID_SEQUENCE,
            hint=_explain(exc) if explain else None,
        ) from exc

    console.result(result.output)
    return exit_codes.SUCCESS


def _handle_rules(rules: RuleSet) -> int:
    """Dispatch the ``rules`` listing."""
    from romanum.cli.rules_table import run_rules

    return run_rules(rules)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the romanum CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    rules = _resolve_rules(args)
    target: str = args.target

    if target.lower() == "rules":
        return _handle_rules(rules)

    return _handle_convert(target, rules, explain=args.explain)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RomanumError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
