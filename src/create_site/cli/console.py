"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) remain functional even when
Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from create_site.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console instance (stdout unless *stderr*)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stdout print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def escape(text: str) -> str:
    """Escape Rich markup in *text*; unchanged when Rich is unavailable."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


def configure_logging(level: str = "WARNING") -> None:
    """Route stdlib logging through Rich on stderr.

    Unknown level names fall back to ``WARNING``.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(level=numeric, stream=sys.stderr, force=True)
        return

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_rich_console(stderr=True), show_path=False)],
        force=True,
    )
