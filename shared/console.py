"""
HillCore Console Interface
===========================

Rich-powered console abstraction providing a unified presentation layer
for every HillCore module.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages and integer
matrices, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_HILL_THEME = Theme(
    {
        "hill.banner": "bold bright_cyan",
        "hill.section": "bold bright_magenta",
        "hill.success": "bold green",
        "hill.warning": "bold yellow",
        "hill.error": "bold red",
        "hill.info": "bold bright_blue",
        "hill.dim": "dim white",
        "hill.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ██╗  ██╗██╗██╗     ██╗
  ██║  ██║██║██║     ██║
  ███████║██║██║     ██║
  ██╔══██║██║██║     ██║
  ██║  ██║██║███████╗███████╗
  ╚═╝  ╚═╝╚═╝╚══════╝╚══════╝
[/bright_cyan]"""

_TAGLINE = "Polygraphic Cipher Toolkit"


class HillConsole:
    """Unified console interface for all HillCore modules.

    Usage::

        con = HillConsole()
        con.banner()
        con.section("Key Setup")
        con.matrix([[7, 8], [11, 11]], title="Key Matrix")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_HILL_THEME,
            quiet=quiet,
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
        """Display the HillCore ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[hill.highlight]{_TAGLINE}[/hill.highlight]\n"
            f"[hill.dim]Version: {version}  |  {now}[/hill.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="hill.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[hill.success][✔] SUCCESS:[/hill.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[hill.warning][⚠] WARNING:[/hill.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[hill.error][✘] ERROR:[/hill.error] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[hill.info][ℹ] INFO:[/hill.info] {message}")

    # ------------------------------------------------------------------ #
    #  Matrix display
    # ------------------------------------------------------------------ #

    def matrix(
        self,
        rows: Sequence[Sequence[int]],
        *,
        title: str = "",
        style: str = "bright_white",
    ) -> None:
        """Render an integer matrix (or column vector) as a bracketed grid.

        Cells are right-aligned so that negative and multi-digit values
        line up column by column.
        """
        tbl = Table(
            title=title or None,
            title_justify="left",
            show_header=False,
            box=None,
            padding=(0, 1),
        )
        width = len(rows[0]) if rows else 0
        tbl.add_column("[", style="hill.dim")
        for _ in range(width):
            tbl.add_column(justify="right", style=style)
        tbl.add_column("]", style="hill.dim")
        for row in rows:
            tbl.add_row("[", *(str(v) for v in row), "]")
        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()
