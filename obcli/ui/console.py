"""Rich console instances and message helpers.

Data (tables, JSON) goes to ``console`` on stdout; errors, warnings and
spinners go to ``err_console`` on stderr so ``--json`` output stays clean.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text

from obcli.ui.theme import THEMES, get_theme, set_theme


console = Console(theme=get_theme().to_rich_theme(), highlight=False)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True, highlight=False)


def apply_theme(name: str) -> None:
    """Switch both consoles to a named theme."""
    theme = THEMES.get(name)
    if theme is None:
        return
    set_theme(theme)
    rich_theme = theme.to_rich_theme()
    console.push_theme(rich_theme)
    err_console.push_theme(rich_theme)


def print_error(message: str) -> None:
    """Print a one-line error to stderr."""
    text = Text()
    text.append("✖ ", style="error")
    text.append(message)
    err_console.print(text)


def print_success(message: str) -> None:
    text = Text()
    text.append("✔ ", style="success")
    text.append(message)
    console.print(text)


def print_warning(message: str) -> None:
    """Print a one-line warning to stderr."""
    text = Text()
    text.append("⚠ ", style="warning")
    text.append(message, style="warning")
    err_console.print(text)


def print_json(data: Any) -> None:
    """Pretty-print a payload as JSON on stdout, unchanged."""
    console.print_json(data=data, indent=2, highlight=False)
