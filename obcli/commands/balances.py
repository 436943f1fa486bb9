"""Balances command - balances across all accounts."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column, format_amount

BALANCE_COLUMNS = [
    Column("AccountId", "Account ID", style="id"),
    Column("Type", "Type"),
    Column("Amount", "Amount", format_amount, style="amount"),
    Column("CreditDebitIndicator", "Indicator"),
]


class BalancesCommand(BaseCommand):
    """View balances."""

    name = "balances"
    description = "View balances"
    actions = {
        "list": ("list [--json]", "List all balances"),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        return self.run_list(flags, "Fetching balances...", self.api.list_balances, BALANCE_COLUMNS)
