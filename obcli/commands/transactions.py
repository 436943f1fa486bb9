"""Transactions command - bulk listing and single-transaction lookup."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column, format_amount, format_date, format_short_id

TRANSACTION_COLUMNS = [
    Column("AccountId", "Account", style="id"),
    Column("TransactionId", "ID", format_short_id),
    Column("BookingDateTime", "Date", format_date),
    Column("Amount", "Amount", format_amount, style="amount"),
    Column("CreditDebitIndicator", "Type"),
]

TRANSACTION_FIELDS = [
    Column("TransactionId", "Transaction ID", style="id"),
    Column("AccountId", "Account ID"),
    Column("Amount", "Amount", format_amount, style="amount"),
    Column("CreditDebitIndicator", "Type"),
    Column("Status", "Status"),
    Column("BookingDateTime", "Booking Date"),
]


class TransactionsCommand(BaseCommand):
    """View transactions."""

    name = "transactions"
    description = "View transactions"
    actions = {
        "list": ("list [--from DATE] [--to DATE] [--json]", "List all transactions"),
        "get": ("get <account-id> <transaction-id> [--json]", "Get transaction details"),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        return self.run_list(
            flags,
            "Fetching transactions...",
            lambda: self.api.list_transactions(**self.date_range(flags)),
            TRANSACTION_COLUMNS,
        )

    def do_get(self, args: list[str], flags: dict) -> bool:
        account_id, transaction_id = args
        return self.run_detail(
            flags,
            "Fetching transaction...",
            lambda: self.api.get_transaction(account_id, transaction_id),
            TRANSACTION_FIELDS,
            "Transaction Details",
        )
