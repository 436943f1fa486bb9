"""Standing orders command."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column

STANDING_ORDER_COLUMNS = [
    Column("AccountId", "Account", style="id"),
    Column("StandingOrderId", "ID"),
    Column("Frequency", "Frequency"),
    Column("Reference", "Reference"),
]

ACCOUNT_STANDING_ORDER_COLUMNS = STANDING_ORDER_COLUMNS[1:]


class StandingOrdersCommand(BaseCommand):
    """View standing orders."""

    name = "standing-orders"
    description = "View standing orders"
    actions = {
        "list": ("list [--json]", "List all standing orders"),
        "account": ("account <account-id> [--json]", "List standing orders for account"),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        return self.run_list(
            flags, "Fetching standing orders...", self.api.list_standing_orders, STANDING_ORDER_COLUMNS
        )

    def do_account(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_list(
            flags,
            "Fetching standing orders...",
            lambda: self.api.get_account_standing_orders(account_id),
            ACCOUNT_STANDING_ORDER_COLUMNS,
        )
