"""Domain models and rules for acctmgr.

This package contains the functional core:
- Amount parsing and formatting with no side effects
- Credit and debit rules returning result values
- No console, file or configuration access
- Easy to test
"""

from acctmgr.domain.amounts import format_money, parse_amount
from acctmgr.domain.models import MAXIMUM_BALANCE, MINIMUM_BALANCE, OPENING_BALANCE, Money

__all__ = [
    "Money",
    "OPENING_BALANCE",
    "MAXIMUM_BALANCE",
    "MINIMUM_BALANCE",
    "format_money",
    "parse_amount",
]
