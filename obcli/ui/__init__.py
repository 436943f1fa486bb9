"""UI components for the Open Banking CLI."""

from obcli.ui.console import (
    apply_theme,
    console,
    err_console,
    print_error,
    print_json,
    print_success,
    print_warning,
)
from obcli.ui.spinners import create_spinner
from obcli.ui.tables import (
    Column,
    create_detail_panel,
    create_results_table,
    format_amount,
    format_date,
    format_short_id,
    print_detail,
    print_table,
)
from obcli.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    "apply_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
    "print_json",
    # Tables
    "Column",
    "create_results_table",
    "create_detail_panel",
    "print_table",
    "print_detail",
    "format_amount",
    "format_short_id",
    "format_date",
    # Spinners
    "create_spinner",
]
