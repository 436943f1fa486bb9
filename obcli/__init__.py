"""
Open Banking CLI - a terminal client for the Open Banking UK Account & Transaction API.

This CLI provides read-only access to:
- Accounts, balances and transactions
- Beneficiaries, direct debits and standing orders
- Statements and their transactions

Results render as aligned tables, or as raw JSON with --json.
"""

__version__ = "1.0.0"
__app_name__ = "Open Banking UK Account & Transaction CLI"
__prog_name__ = "openbanking"
