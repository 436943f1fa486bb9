"""Direct debits command."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column

DIRECT_DEBIT_COLUMNS = [
    Column("AccountId", "Account", style="id"),
    Column("DirectDebitId", "ID"),
    Column("MandateIdentification", "Mandate"),
    Column("DirectDebitStatusCode", "Status"),
]

ACCOUNT_DIRECT_DEBIT_COLUMNS = DIRECT_DEBIT_COLUMNS[1:]


class DirectDebitsCommand(BaseCommand):
    """View direct debits."""

    name = "direct-debits"
    description = "View direct debits"
    actions = {
        "list": ("list [--json]", "List all direct debits"),
        "account": ("account <account-id> [--json]", "List direct debits for account"),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        return self.run_list(
            flags, "Fetching direct debits...", self.api.list_direct_debits, DIRECT_DEBIT_COLUMNS
        )

    def do_account(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_list(
            flags,
            "Fetching direct debits...",
            lambda: self.api.get_account_direct_debits(account_id),
            ACCOUNT_DIRECT_DEBIT_COLUMNS,
        )
