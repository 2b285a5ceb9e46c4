"""Domain type definitions for acctmgr.

These NewTypes and constants provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- OPENING_BALANCE: Balance every new ledger starts with
- MAXIMUM_BALANCE: Largest balance the ledger can hold
"""

from typing import NewType

# Money amounts are stored as cents (minor units) so a balance never carries more than two decimals
Money = NewType("Money", int)

# 1000.00
OPENING_BALANCE = Money(100000)

# 999999.99
MAXIMUM_BALANCE = Money(99999999)

MINIMUM_BALANCE = Money(0)
