"""Beneficiaries command."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column

BENEFICIARY_COLUMNS = [
    Column("AccountId", "Account", style="id"),
    Column("BeneficiaryId", "ID"),
    Column("Reference", "Reference"),
]

# The account is implied when listing for one account
ACCOUNT_BENEFICIARY_COLUMNS = BENEFICIARY_COLUMNS[1:]


class BeneficiariesCommand(BaseCommand):
    """View beneficiaries."""

    name = "beneficiaries"
    description = "View beneficiaries"
    actions = {
        "list": ("list [--json]", "List all beneficiaries"),
        "account": ("account <account-id> [--json]", "List beneficiaries for account"),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        return self.run_list(
            flags, "Fetching beneficiaries...", self.api.list_beneficiaries, BENEFICIARY_COLUMNS
        )

    def do_account(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_list(
            flags,
            "Fetching beneficiaries...",
            lambda: self.api.get_account_beneficiaries(account_id),
            ACCOUNT_BENEFICIARY_COLUMNS,
        )
