"""Config command - manage the locally stored access token."""

from __future__ import annotations

import time
from datetime import datetime

from rich.table import Table
from rich.text import Text

from obcli import __app_name__
from obcli.commands.base import BaseCommand
from obcli.ui.console import console, print_error, print_success


class ConfigCommand(BaseCommand):
    """Manage CLI configuration."""

    name = "config"
    description = "Manage CLI configuration"
    actions = {
        "set": ("set [--token TOKEN] [--expiry MS]", "Set configuration values"),
        "show": ("show", "Show current configuration"),
        "clear": ("clear", "Clear configuration"),
    }

    def do_set(self, args: list[str], flags: dict) -> bool:
        token = flags.get("token")
        expiry = flags.get("expiry")

        if not token and not expiry:
            print_error("No options provided. Use --token or --expiry")
            return False
        if token is True or expiry is True:
            print_error("--token and --expiry each need a value")
            return False

        if expiry:
            # a bad expiry writes nothing, token included
            try:
                expiry_ms = int(expiry)
            except ValueError:
                print_error(f"Invalid --expiry: {expiry!r} (expected epoch milliseconds)")
                return False

        if token:
            self.settings.set("accessToken", token)
            print_success("Access token set")
        if expiry:
            self.settings.set("tokenExpiry", expiry_ms)
            print_success("Token expiry set")
        return True

    def do_show(self, args: list[str], flags: dict) -> bool:
        has_token = self.settings.is_configured()
        token_expiry = self.settings.get("tokenExpiry")

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style="muted")
        table.add_column("Value")

        table.add_row(
            "Access Token",
            Text("set", style="success") if has_token else Text("not set", style="error"),
        )
        if token_expiry:
            try:
                expiry = datetime.fromtimestamp(token_expiry / 1000).strftime("%Y-%m-%d %H:%M:%S")
            except (OverflowError, OSError, ValueError):
                expiry = str(token_expiry)
            if token_expiry > time.time() * 1000:
                table.add_row("Token Expiry", Text(expiry, style="success"))
            else:
                table.add_row("Token Expiry", Text(f"expired ({expiry})", style="error"))
        table.add_row("Config File", Text(str(self.settings.path), style="dim"))

        console.print()
        console.print(Text(f"{__app_name__} Configuration", style="highlight"))
        console.print()
        console.print(table)
        console.print()
        return True

    def do_clear(self, args: list[str], flags: dict) -> bool:
        self.settings.clear()
        print_success("Configuration cleared")
        return True
