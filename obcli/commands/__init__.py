"""CLI Commands for the Open Banking CLI."""

from obcli.commands.accounts import AccountsCommand
from obcli.commands.balances import BalancesCommand
from obcli.commands.beneficiaries import BeneficiariesCommand
from obcli.commands.config import ConfigCommand
from obcli.commands.direct_debits import DirectDebitsCommand
from obcli.commands.help import HelpCommand
from obcli.commands.standing_orders import StandingOrdersCommand
from obcli.commands.statements import StatementsCommand
from obcli.commands.transactions import TransactionsCommand

__all__ = [
    "ConfigCommand",
    "AccountsCommand",
    "BalancesCommand",
    "TransactionsCommand",
    "BeneficiariesCommand",
    "DirectDebitsCommand",
    "StandingOrdersCommand",
    "StatementsCommand",
    "HelpCommand",
]
