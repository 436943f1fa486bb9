"""Help command - display CLI help."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from obcli import __app_name__, __prog_name__, __version__
from obcli.commands.base import BaseCommand
from obcli.ui.console import console, print_error


class HelpCommand(BaseCommand):
    """Display help information built from the command registry."""

    name = "help"
    description = "Show help information"
    actions = {}

    def __init__(self, config, settings, commands: dict[str, BaseCommand], api=None):
        super().__init__(config, settings, api)
        self.commands = commands

    def execute(self, args: list[str]) -> bool:
        """Display general help, or help for one group."""
        flags, remaining = self.parse_flags(args)

        if remaining:
            return self._show_command_help(remaining[0].lower())
        return self._show_general_help()

    def _show_general_help(self) -> bool:
        table = Table(
            show_header=True,
            header_style="header",
            box=None,
            padding=(0, 2),
        )
        table.add_column("Command", style="command")
        table.add_column("Actions", style="muted")
        table.add_column("Description", style="text")

        for name, cmd in self.commands.items():
            table.add_row(name, ", ".join(cmd.actions), cmd.description)

        console.print(Text(f"{__app_name__} v{__version__}", style="highlight"))
        console.print()
        console.print(Text(f"Usage: {__prog_name__} [--debug] <command> <action> [options]", style="text"))
        console.print()
        console.print(table)

        console.print()
        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append(f"{__prog_name__} help <command>", style="command")
        tips.append(" for the actions of one command\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Add ", style="text")
        tips.append("--json", style="command")
        tips.append(" to any read command for raw output\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Start with ", style="text")
        tips.append(f"{__prog_name__} config set --token <token>", style="command")
        console.print(tips)

        return True

    def _show_command_help(self, cmd_name: str) -> bool:
        cmd = self.commands.get(cmd_name)
        if cmd is None:
            print_error(f"Unknown command: {cmd_name}")
            console.print(f"[muted]Use {__prog_name__} help to see available commands[/muted]")
            return False

        text = Text()
        text.append(f"{cmd.description}\n\n", style="text")
        text.append("Usage:\n", style="muted")
        for usage, description in cmd.actions.values():
            text.append(f"  {__prog_name__} {cmd.name} {usage}\n", style="command")
            text.append(f"      {description}\n", style="muted")

        console.print(Panel(
            text,
            title=f"[primary]{cmd.name}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        return True
