"""Table and panel components for displaying API records."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from obcli.ui.console import console

# Widest a column may grow before values are cropped
MAX_COLUMN_WIDTH = 40

NO_RESULTS = "No results found."

Formatter = Callable[[Any, dict], str]


@dataclass(frozen=True)
class Column:
    """One table column: the record key, its header, and an optional formatter."""

    key: str
    label: str
    format: Optional[Formatter] = None
    style: str = "text"

    def render(self, row: dict) -> str:
        value = row.get(self.key)
        if self.format is not None:
            return str(self.format(value, row))
        return "" if value is None else str(value)


def format_amount(value: Any, row: dict | None = None) -> str:
    """Join a nested ``{Amount, Currency}`` pair, defaulting to 0.00."""
    amount = value.get("Amount") if isinstance(value, dict) else None
    currency = value.get("Currency") if isinstance(value, dict) else None
    return f"{amount or '0.00'} {currency or ''}"


def format_short_id(value: Any, row: dict | None = None) -> str:
    """First 10 characters of an identifier, then an ellipsis."""
    if not value:
        return ""
    return f"{str(value)[:10]}..."


def format_date(value: Any, row: dict | None = None) -> str:
    """Date part of an ISO-8601 timestamp."""
    if not value:
        return ""
    return str(value)[:10]


def column_widths(rows: Sequence[dict], columns: Sequence[Column]) -> list[int]:
    """Width of each column: widest of header and values, capped."""
    widths = []
    for col in columns:
        width = len(col.label)
        for row in rows:
            width = max(width, len(col.render(row)))
        widths.append(min(width, MAX_COLUMN_WIDTH))
    return widths


def create_results_table(rows: Sequence[dict], columns: Sequence[Column]) -> Table:
    """Build an aligned, borderless results table."""
    table = Table(
        show_header=True,
        header_style="header",
        box=None,
        padding=(0, 2, 0, 0),
        show_edge=False,
    )
    for col, width in zip(columns, column_widths(rows, columns)):
        table.add_column(
            col.label,
            style=col.style,
            min_width=width,
            max_width=width,
            no_wrap=True,
            overflow="crop",
        )
    for row in rows:
        table.add_row(*(Text(col.render(row)[:MAX_COLUMN_WIDTH]) for col in columns))
    return table


def print_table(rows: Optional[Sequence[dict]], columns: Sequence[Column]) -> None:
    """Print rows as a table, or a notice when there are none."""
    if not rows:
        console.print(Text(NO_RESULTS, style="warning"))
        return

    # never let the terminal width squeeze columns below their computed size
    natural = sum(column_widths(rows, columns)) + 2 * (len(columns) - 1)
    console.print(create_results_table(rows, columns), width=max(console.width, natural))
    console.print()
    console.print(Text(f"{len(rows)} result(s)", style="dim"))


def create_detail_panel(
    record: dict,
    fields: Sequence[Column],
    title: str,
) -> Panel:
    """Label/value panel for a single record; missing values show N/A."""
    label_width = max(len(f.label) for f in fields) + 2
    text = Text()
    for i, field in enumerate(fields):
        value = field.render(record) or "N/A"
        text.append(f"{field.label + ':':<{label_width}}", style="muted")
        text.append(value, style=field.style)
        if i < len(fields) - 1:
            text.append("\n")

    return Panel(
        text,
        title=f"[tertiary]{title}[/tertiary]",
        title_align="left",
        border_style="tertiary",
        padding=(1, 2),
    )


def print_detail(record: Optional[dict], fields: Sequence[Column], title: str) -> None:
    if not record:
        console.print(Text(NO_RESULTS, style="warning"))
        return
    console.print()
    console.print(create_detail_panel(record, fields, title))
