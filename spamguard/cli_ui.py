"""Console output and prompts for the spamguard CLI.

Commands print through these helpers so status marks and decision colours
look the same in every command. Messages are rendered as plain text, so
brackets in error strings (pydantic errors carry ``[type=...]``) are shown
as-is instead of being read as Rich markup.
"""

from __future__ import annotations

import sys
from typing import Any, Mapping, Optional, Sequence

import questionary
from questionary import Style as QStyle
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# Exit status when an interactive prompt is cancelled (128 + SIGINT)
EXIT_CANCELLED = 130

THEME = Theme(
    {
        "decision.pass": "green",
        "decision.block": "bold red",
        "decision.abstain": "yellow",
        "muted": "dim",
    }
)

console = Console(theme=THEME, highlight=False)

PROMPT_STYLE = QStyle(
    [
        ("qmark", "fg:cyan bold"),
        ("answer", "fg:cyan"),
    ]
)

MAX_WIDTH = 80


def _width() -> int:
    return min(console.width, MAX_WIDTH)


def _mark(symbol: str, style: str, msg: str) -> None:
    console.print(Text.assemble("  ", (symbol, style), " ", msg))


def banner(version: str) -> None:
    console.print(Text.assemble(("SpamGuard", "bold"), (f"  v{version}", "muted")))


def success(msg: str) -> None:
    _mark("\u2713", "decision.pass", msg)


def error(msg: str, hint: Optional[str] = None) -> None:
    """Print a failure line, with an optional muted hint underneath."""
    _mark("\u2717", "decision.block", msg)
    if hint:
        console.print(Text(f"    {hint}", style="muted"))


def warning(msg: str) -> None:
    _mark("!", "decision.abstain", msg)


def dim(msg: str) -> None:
    console.print(Text(f"  {msg}", style="muted"))


def decision_text(decision: str) -> Text:
    """Label for a CheckDecision value, coloured by the theme."""
    return Text(decision.upper(), style=f"decision.{decision}")


def config_panel(title: str, items: Mapping[str, str]) -> None:
    """Boxed ``key: value`` summary of the effective configuration."""
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold")
    grid.add_column()
    for key, value in items.items():
        grid.add_row(Text(f"{key}:"), Text(value))

    console.print()
    console.print(
        Panel(
            grid,
            title=title,
            title_align="left",
            border_style="muted",
            width=_width(),
        )
    )


def make_table(title: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print a table; cells may be plain strings or styled Text."""
    table = Table(
        title=title,
        title_style="bold",
        header_style="bold",
        border_style="muted",
        width=_width(),
    )
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(cell if isinstance(cell, Text) else Text(str(cell)) for cell in row))

    console.print()
    console.print(table)


def spinner(message: str) -> Any:
    return console.status(f"  {message}", spinner="dots")


def is_interactive() -> bool:
    return hasattr(sys.stdin, "isatty") and sys.stdin.isatty()


def prompt_text(message: str) -> str:
    """Ask for one line of input.

    Raises:
        SystemExit: With EXIT_CANCELLED when the prompt is cancelled
    """
    answer = questionary.text(message, style=PROMPT_STYLE).ask()
    if answer is None:
        raise SystemExit(EXIT_CANCELLED)
    return answer
