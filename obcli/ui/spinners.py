"""Spinner shown while a request is in flight."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from obcli.ui.console import err_console

# Spinner names understood by rich
SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a transient spinner on stderr.

    Nothing is drawn when stderr is not a terminal, so piped output and
    captured test output stay free of control sequences.
    """
    if not err_console.is_terminal:
        yield
        return

    spinner_type = SPINNER_STYLES.get(style, "dots")
    with err_console.status(f"[text]{message}[/text]", spinner=spinner_type, spinner_style="spinner"):
        yield
