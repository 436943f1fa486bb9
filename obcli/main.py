"""Main CLI entry point - one command per invocation."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from rich.logging import RichHandler

from obcli import __app_name__, __prog_name__, __version__
from obcli.commands.accounts import AccountsCommand
from obcli.commands.balances import BalancesCommand
from obcli.commands.base import BaseCommand
from obcli.commands.beneficiaries import BeneficiariesCommand
from obcli.commands.config import ConfigCommand
from obcli.commands.direct_debits import DirectDebitsCommand
from obcli.commands.help import HelpCommand
from obcli.commands.standing_orders import StandingOrdersCommand
from obcli.commands.statements import StatementsCommand
from obcli.commands.transactions import TransactionsCommand
from obcli.core.api_client import APIClient
from obcli.core.config import CLIConfig, get_config, set_config
from obcli.core.settings import SettingsStore
from obcli.ui.console import apply_theme, console, err_console, print_error

logger = logging.getLogger(__name__)


class OpenBankingCLI:
    """Main CLI application."""

    def __init__(
        self,
        config: CLIConfig | None = None,
        settings: SettingsStore | None = None,
        api: APIClient | None = None,
    ):
        self.config = config or get_config()
        set_config(self.config)

        self.settings = settings or SettingsStore(self.config.settings_path)
        self.api = api or APIClient(
            self.config.base_url,
            token=self.settings.get("accessToken"),
            timeout=self.config.timeout,
        )

        # Command registry
        command_classes: list[type[BaseCommand]] = [
            ConfigCommand,
            AccountsCommand,
            BalancesCommand,
            TransactionsCommand,
            BeneficiariesCommand,
            DirectDebitsCommand,
            StandingOrdersCommand,
            StatementsCommand,
        ]
        self.commands: dict[str, BaseCommand] = {
            cls.name: cls(self.config, self.settings, self.api) for cls in command_classes
        }
        self.help = HelpCommand(self.config, self.settings, self.commands, self.api)

    def execute(self, cmd_name: str, args: list[str]) -> int:
        """Run one command and map the outcome to an exit code."""
        if cmd_name == "help":
            return 0 if self.help.execute(args) else 1

        command = self.commands.get(cmd_name)
        if command is None:
            print_error(f"Unknown command: {cmd_name}")
            err_console.print(f"[muted]Run {__prog_name__} help to see available commands[/muted]")
            return 1

        try:
            return 0 if command.execute(args) else 1
        except KeyboardInterrupt:
            err_console.print("\n[warning]Interrupted[/warning]")
            return 130
        except Exception as e:
            logger.debug("Unhandled error in %s", cmd_name, exc_info=True)
            print_error(f"Unexpected error: {type(e).__name__}: {e}")
            return 1
        finally:
            self.api.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__prog_name__,
        description=f"{__app_name__} - Access account and transaction data",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Override the API base URL",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show the version and exit",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Command group to execute",
    )
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
    # Keep httpx/httpcore chatter out unless it is asked for
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)


def run(
    argv: Optional[list[str]] = None,
    config: CLIConfig | None = None,
    settings: SettingsStore | None = None,
    api: APIClient | None = None,
) -> int:
    """Parse argv, run a single command and return the exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0] in ("-h", "--help"):
        argv = ["help", *argv[1:]]

    # Use parse_known_args to allow command-specific flags to pass through
    args, remaining = build_parser().parse_known_args(argv)

    if args.version:
        console.print(f"{__prog_name__} {__version__}")
        return 0

    config = config or CLIConfig()
    updates = {}
    if args.base_url:
        updates["base_url"] = args.base_url
    if args.debug:
        updates["debug"] = True
    if updates:
        config = config.model_copy(update=updates)

    configure_logging(config.debug)
    apply_theme(config.theme)

    cli = OpenBankingCLI(config, settings=settings, api=api)

    if not args.command:
        cli.help.execute([])
        return 0

    return cli.execute(args.command.lower(), remaining)


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
