"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and plain
conversions remain functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from romanum.exceptions import EnvironmentError

_LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	Diagnostics go to stderr; only :meth:`result` writes to stdout so the
	converted value can be piped.
	"""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def result(self, text: str) -> None:
		"""Write a conversion result to stdout, unstyled."""
		print(text, file=sys.stdout)


console = _ConsoleProxy()


def configure_logging(verbose: bool) -> None:
	"""Send ``romanum`` log records to stderr.

	At ``verbose`` the level is DEBUG and a ``rich.logging.RichHandler``
	is used when Rich is importable; otherwise only warnings are shown
	through a plain stream handler.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))
	else:
		handler = RichHandler(
			console=get_rich_console(),
			show_path=False,
			show_time=False,
		)
		handler.setFormatter(logging.Formatter("%(message)s"))

	logger = logging.getLogger("romanum")
	for existing in list(logger.handlers):
		logger.removeHandler(existing)
	logger.addHandler(handler)
	logger.setLevel(level)
	logger.propagate = False
