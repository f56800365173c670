"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from wacs_options.exceptions import EnvironmentError

LOG_FORMAT: str = "%(message)s"
PLAIN_LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain print."""
		stream = sys.stderr if self._stderr else sys.stdout
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=stream)
			return
		rich_console.print(*objects, markup=markup, highlight=markup)


console = _ConsoleProxy()
"""Diagnostics and errors (stderr)."""

output = _ConsoleProxy(stderr=False)
"""Requested output such as help text (stdout)."""


_installed_handler: logging.Handler | None = None


def configure_logging(verbose: bool = False) -> None:
	"""Install the package log handler; DEBUG when *verbose*, else WARNING.

	Uses :class:`rich.logging.RichHandler` when Rich is importable and a
	plain stderr :class:`logging.StreamHandler` otherwise.  Calling this
	again replaces the handler installed by the previous call.
	"""
	global _installed_handler

	level = logging.DEBUG if verbose else logging.WARNING
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))
	else:
		handler = RichHandler(
			console=get_rich_console(),
			show_path=False,
			rich_tracebacks=verbose,
		)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))

	logger = logging.getLogger("wacs_options")
	if _installed_handler is not None:
		logger.removeHandler(_installed_handler)
	logger.addHandler(handler)
	logger.setLevel(level)
	_installed_handler = handler
