"""Statements command - statements for an account and their transactions."""

from __future__ import annotations

from obcli.commands.base import BaseCommand
from obcli.ui.tables import Column, format_amount, format_date, format_short_id

STATEMENT_COLUMNS = [
    Column("StatementId", "ID", style="id"),
    Column("Type", "Type"),
    Column("StartDateTime", "Start", format_date),
    Column("EndDateTime", "End", format_date),
]

STATEMENT_FIELDS = [
    Column("StatementId", "Statement ID", style="id"),
    Column("Type", "Type"),
    Column("StartDateTime", "Start Date"),
    Column("EndDateTime", "End Date"),
]

STATEMENT_TRANSACTION_COLUMNS = [
    Column("TransactionId", "ID", format_short_id, style="id"),
    Column("BookingDateTime", "Date", format_date),
    Column("Amount", "Amount", format_amount, style="amount"),
    Column("CreditDebitIndicator", "Type"),
]


class StatementsCommand(BaseCommand):
    """View statements."""

    name = "statements"
    description = "View statements"
    actions = {
        "list": ("list <account-id> [--json]", "List statements for account"),
        "get": ("get <account-id> <statement-id> [--json]", "Get statement details"),
        "transactions": (
            "transactions <account-id> <statement-id> [--json]",
            "Get statement transactions",
        ),
    }

    def do_list(self, args: list[str], flags: dict) -> bool:
        account_id = args[0]
        return self.run_list(
            flags,
            "Fetching statements...",
            lambda: self.api.list_statements(account_id),
            STATEMENT_COLUMNS,
        )

    def do_get(self, args: list[str], flags: dict) -> bool:
        account_id, statement_id = args
        return self.run_detail(
            flags,
            "Fetching statement...",
            lambda: self.api.get_statement(account_id, statement_id),
            STATEMENT_FIELDS,
            "Statement Details",
        )

    def do_transactions(self, args: list[str], flags: dict) -> bool:
        account_id, statement_id = args
        return self.run_list(
            flags,
            "Fetching transactions...",
            lambda: self.api.get_statement_transactions(account_id, statement_id),
            STATEMENT_TRANSACTION_COLUMNS,
        )
