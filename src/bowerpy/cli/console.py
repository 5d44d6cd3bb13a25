"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) remain functional even when Rich is not
installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from bowerpy.exceptions import EnvironmentError


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
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain stderr print.

		*options* are forwarded to Rich only.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, **options)

	def error(self, message: str) -> None:
		"""Render *message* as one error-styled line, markup left literal."""
		try:
			rich_console = get_rich_console()
			from rich.text import Text
		except (EnvironmentError, ModuleNotFoundError):
			print(message, file=sys.stderr)
			return
		rich_console.print(Text(message, style="bold red"), soft_wrap=True)

	def labelled(self, label: str, message: str, *, style: str) -> None:
		"""Render a styled *label* followed by *message* taken literally."""
		try:
			rich_console = get_rich_console()
			from rich.text import Text
		except (EnvironmentError, ModuleNotFoundError):
			print(f"{label} {message}", file=sys.stderr)
			return
		rich_console.print(Text.assemble((label, style), " ", message), soft_wrap=True)


console = _ConsoleProxy()


def enable_debug_logging() -> None:
	"""Route ``bowerpy`` log records to stderr at DEBUG level.

	Uses :class:`rich.logging.RichHandler` when Rich is installed.
	"""
	logger = logging.getLogger("bowerpy")
	logger.setLevel(logging.DEBUG)
	if logger.handlers:
		return
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)
	logger.addHandler(handler)
