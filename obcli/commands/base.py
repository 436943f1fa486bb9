"""Base command class for CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import Any, Optional

from rich.markup import escape

from obcli import __prog_name__
from obcli.core.api_client import APIClient
from obcli.core.config import CLIConfig
from obcli.core.errors import InvalidRequestError, ObcliError
from obcli.core.settings import SettingsStore
from obcli.ui.console import err_console, print_error, print_json, print_warning
from obcli.ui.spinners import create_spinner
from obcli.ui.tables import Column, print_detail, print_table

logger = logging.getLogger(__name__)


class BaseCommand:
    """Base class for all command groups.

    A group dispatches on its first positional argument (the action) to a
    ``do_<action>`` method. ``actions`` maps each action to its usage line
    and description, and drives both dispatch and help output.
    """

    name: str = "base"
    description: str = "Base command"
    actions: dict[str, tuple[str, str]] = {}

    # Flags that never take a value
    boolean_flags: frozenset[str] = frozenset({"json", "help", "h"})

    def __init__(self, config: CLIConfig, settings: SettingsStore, api: Optional[APIClient] = None):
        self.config = config
        self.settings = settings
        self._api = api

    @property
    def api(self) -> APIClient:
        """Lazy-initialize the API client from the stored token."""
        if self._api is None:
            self._api = APIClient(
                self.config.base_url,
                token=self.settings.get("accessToken"),
                timeout=self.config.timeout,
            )
        return self._api

    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments, starting with the action

        Returns:
            True if successful, False otherwise
        """
        if not args or args[0] in ("-h", "--help"):
            self.print_usage()
            return bool(args)

        action, rest = args[0], args[1:]
        handler = getattr(self, f"do_{action.replace('-', '_')}", None)
        if action not in self.actions or handler is None:
            print_error(f"Unknown action: {self.name} {action}")
            self.print_usage()
            return False

        flags, positional = self.parse_flags(rest)
        if flags.get("help") or flags.get("h"):
            self.print_usage()
            return True

        usage = self.actions[action][0]
        expected = usage.count("<")
        if len(positional) != expected:
            print_error(f"Usage: {__prog_name__} {self.name} {usage}")
            return False

        return handler(positional, flags)

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments."""
        flags = {}
        remaining = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--") and len(arg) > 2:
                key = arg[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    flags[key] = value
                elif key in self.boolean_flags:
                    flags[key] = True
                elif i + 1 < len(args) and not args[i + 1].startswith("--"):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            elif len(arg) == 2 and arg[0] == "-" and arg[1] in self.boolean_flags:
                flags[arg[1]] = True
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    def print_usage(self) -> None:
        err_console.print(
            f"[header]Usage:[/header] {__prog_name__} {self.name} <action> {escape('[options]')}"
        )
        err_console.print()
        for usage, description in self.actions.values():
            padded = escape(f"{usage:<38}")
            err_console.print(f"  [command]{padded}[/command] [muted]{escape(description)}[/muted]")

    def require_auth(self) -> bool:
        """Check a token is stored before touching the network."""
        if not self.settings.is_configured():
            print_error("Access token not configured.")
            err_console.print()
            err_console.print("Run the following to configure:")
            err_console.print(f"  [command]{__prog_name__} config set --token <token>[/command]")
            return False

        if self.settings.get("tokenExpiry") and not self.settings.has_valid_token():
            print_warning("Access token is expired or about to expire.")
        return True

    @staticmethod
    def date_range(flags: dict[str, Any]) -> dict[str, Optional[str]]:
        """Read --from/--to, checking each is an ISO-8601 date or datetime."""
        result = {}
        for flag, name in (("from", "from_date"), ("to", "to_date")):
            value = flags.get(flag)
            if value is None:
                result[name] = None
                continue
            if value is True or not _is_iso_date(value):
                raise InvalidRequestError(
                    f"Invalid --{flag} date: expected ISO 8601 (e.g. 2024-01-31)."
                )
            result[name] = value
        return result

    def fetch(self, message: str, call: Callable[[], Any]) -> Any:
        """Run one API call behind a spinner."""
        with create_spinner(message, style="loading"):
            return call()

    def run_list(
        self,
        flags: dict[str, Any],
        message: str,
        call: Callable[[], Sequence[dict]],
        columns: Sequence[Column],
    ) -> bool:
        """Fetch a list and render it as JSON or a table."""
        return self._run(flags, message, call, lambda rows: print_table(rows, columns))

    def run_detail(
        self,
        flags: dict[str, Any],
        message: str,
        call: Callable[[], Optional[dict]],
        fields: Sequence[Column],
        title: str,
    ) -> bool:
        """Fetch a single record and render it as JSON or a detail panel."""
        return self._run(flags, message, call, lambda record: print_detail(record, fields, title))

    def _run(
        self,
        flags: dict[str, Any],
        message: str,
        call: Callable[[], Any],
        render: Callable[[Any], None],
    ) -> bool:
        if not self.require_auth():
            return False
        try:
            result = self.fetch(message, call)
        except ObcliError as e:
            logger.debug("%s failed: %r", self.name, e)
            print_error(e.message)
            return False

        if flags.get("json"):
            print_json(result)
        else:
            render(result)
        return True


def _is_iso_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        pass
    try:
        # fromisoformat before 3.11 rejects a trailing Z
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False
