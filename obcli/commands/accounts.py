"""Accounts command - list accounts and drill into one."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column, format_amount, format_date, format_short_id

ACCOUNT_COLUMNS = [
    Column("AccountId", "ID", style="id"),
    Column("Nickname", "Nickname"),
    Column("Currency", "Currency"),
    Column("AccountType", "Type"),
    Column("AccountSubType", "SubType"),
]

ACCOUNT_FIELDS = [
    Column("AccountId", "Account ID", style="id"),
    Column("Nickname", "Nickname"),
    Column("Currency", "Currency"),
    Column("AccountType", "Type"),
    Column("AccountSubType", "SubType"),
]

BALANCE_COLUMNS = [
    Column("Type", "Type"),
    Column("Amount", "Amount", format_amount, style="amount"),
    Column("CreditDebitIndicator", "Indicator"),
    Column("DateTime", "Date Time"),
]

TRANSACTION_COLUMNS = [
    Column("TransactionId", "ID", format_short_id, style="id"),
    Column("BookingDateTime", "Date", format_date),
    Column("Amount", "Amount", format_amount, style="amount"),
    Column("CreditDebitIndicator", "Type"),
    Column("Status", "Status"),
]


class AccountsCommand(BaseCommand):
    """Accounts and their balances and transactions."""

    name = "accounts"
    description = "Manage accounts"
    actions = {
        "list": ("list [--json]", "List all accounts"),
        "get": ("get <account-id> [--json]", "Get account details"),
        "balances": ("balances <account-id> [--json]", "Get account balances"),
        "transactions": (
            "transactions <account-id> [--from DATE] [--to DATE] [--json]",
            "Get account transactions",
        ),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        return self.run_list(flags, "Fetching accounts...", self.api.list_accounts, ACCOUNT_COLUMNS)

    def do_get(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_detail(
            flags,
            "Fetching account...",
            lambda: self.api.get_account(account_id),
            ACCOUNT_FIELDS,
            "Account Details",
        )

    def do_balances(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_list(
            flags,
            "Fetching balances...",
            lambda: self.api.get_account_balances(account_id),
            BALANCE_COLUMNS,
        )

    def do_transactions(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_list(
            flags,
            "Fetching transactions...",
            lambda: self.api.get_account_transactions(account_id, **self.date_range(flags)),
            TRANSACTION_COLUMNS,
        )
