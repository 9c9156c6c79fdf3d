"""User-facing output: ``info``, ``warn`` and ``success`` lines.

``info`` and ``success`` text may contain Rich markup, so callers escape
any user-supplied value they interpolate.  ``warn`` text is always
plain and is escaped here.  The console proxy falls back to plain
printing when Rich is unavailable.
"""

from __future__ import annotations

from create_site.cli.console import console, escape


class ConsoleReporter:
    """:class:`~create_site.core.protocols.Reporter` backed by the console."""

    def info(self, text: str) -> None:
        console.print(text)

    def warn(self, text: str) -> None:
        console.print(f"[yellow]{escape(text)}[/yellow]")

    def success(self, text: str) -> None:
        console.print(f"[green]✔ {text}[/green]")


reporter = ConsoleReporter()
