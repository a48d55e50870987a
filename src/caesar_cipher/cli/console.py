"""CLI console helpers built on Rich.

All user-facing text goes to stdout, one message per line.  Rich only
adds colour when stdout is a terminal, so redirected output stays
byte-for-byte plain.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from caesar_cipher.config import DEFAULT_SETTINGS


def get_rich_console() -> Console:
	"""Create a Rich console bound to the current ``sys.stdout``."""
	return Console(highlight=False, emoji=False)


class _ConsoleProxy:
	"""Thin facade so callers never deal with markup escaping."""

	def print(self, text: str) -> None:
		"""Print *text* verbatim on a single line."""
		get_rich_console().print(text, markup=False, soft_wrap=True)

	def error(self, message: str, *, program_name: str = DEFAULT_SETTINGS.program_name) -> None:
		"""Print ``<program>: error: <message>`` with a highlighted header.

		Only the header goes through Rich.  The message is written as-is
		so paths with tabs or control characters are reported exactly.
		"""
		rich_console = get_rich_console()
		rich_console.print(
			f"[bold red]{escape(program_name)}: error:[/bold red]",
			end="",
			soft_wrap=True,
		)
		rich_console.file.write(f" {message}\n")
		rich_console.file.flush()


console = _ConsoleProxy()
