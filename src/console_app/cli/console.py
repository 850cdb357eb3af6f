"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

from typing import Any

from console_app.exceptions import EnvironmentError


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
	"""Create a Rich console instance targeting stdout."""
	console_class = _load_rich_console_class()
	return console_class()


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, **kwargs: Any) -> None:
		"""Render with Rich when available, else plain stdout print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects)
			return
		rich_console.print(*objects, **kwargs)

	def print_plain(self, *objects: object) -> None:
		"""Write user-supplied text byte-for-byte.

		Bypasses Rich rendering entirely, so markup, emoji codes and tabs
		reach the terminal unchanged.
		"""
		text = " ".join(str(obj) for obj in objects)
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(text)
			return
		rich_console.file.write(text + "\n")
		rich_console.file.flush()

	def clear(self) -> None:
		"""Clear the terminal; a no-op when output is not a terminal."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			return
		if rich_console.is_terminal:
			rich_console.clear()


console = _ConsoleProxy()
