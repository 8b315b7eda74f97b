"""
Guardian Console Interface
===========================

Rich-powered console abstraction giving every Guardian command the same
banner, section headers, coloured status messages, tables and spinners.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_GUARDIAN_THEME = Theme(
    {
        "guardian.banner": "bold bright_cyan",
        "guardian.section": "bold bright_magenta",
        "guardian.success": "bold green",
        "guardian.warning": "bold yellow",
        "guardian.error": "bold red",
        "guardian.info": "bold bright_blue",
        "guardian.dim": "dim white",
        "guardian.critical": "bold white on red",
        "guardian.high": "bold red",
        "guardian.medium": "bold yellow",
        "guardian.low": "bold bright_cyan",
        "guardian.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
   ___ _   _  _   ___ ___ ___   _   _  _
  / __| | | |/_\ | _ \   \_ _| /_\ | \| |
 | (_ | |_| / _ \|   / |) | | / _ \| .` |
  \___|\___/_/ \_\_|_\___/___/_/ \_\_|\_|
[/bright_cyan]"""

_TAGLINE = "Password Strength Meter & Secure Secret Generator"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "guardian.critical",
    "HIGH": "guardian.high",
    "MEDIUM": "guardian.medium",
    "LOW": "guardian.low",
    "INFO": "guardian.informational",
}


class GuardianConsole:
    """Unified console interface for Guardian commands.

    Usage::

        con = GuardianConsole()
        con.banner()
        con.section("Strength Assessment")
        con.success("Passphrase generated")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress the banner, section headers, info and success
                messages and the spinner. Results, warnings and errors
                are always printed.
        """
        self._quiet = quiet
        self._console = Console(
            theme=_GUARDIAN_THEME,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Guardian banner with version and local time."""
        if self._quiet:
            return
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[guardian.banner]{_TAGLINE}[/guardian.banner]\n"
            f"[guardian.dim]Version: {version}  |  {now}[/guardian.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        if self._quiet:
            return
        self._console.rule(f"  {title}  ", style="guardian.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(f"[guardian.success][✔] SUCCESS:[/guardian.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[guardian.warning][⚠] WARNING:[/guardian.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[guardian.error][✘] ERROR:[/guardian.error] {message}")

    def info(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(f"[guardian.info][ℹ] INFO:[/guardian.info] {message}")

    def critical(self, message: str) -> None:
        self._console.print(f"[guardian.critical][☠] CRITICAL: {message}[/guardian.critical]")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings (objects with ``severity``, ``title`` and
        ``description``) with severity colouring."""
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            style = _SEVERITY_STYLES.get(sev_name)
            sev_cell = f"[{style}]{sev_name}[/{style}]" if style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message."""
        if self._quiet:
            yield None
            return
        with self._console.status(
            f"[guardian.info]{message}[/guardian.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()
