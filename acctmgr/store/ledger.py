"""In-memory ledger store holding a single balance.

The store has no business rules: write() replaces the balance
unconditionally and all validation belongs to account operations.
"""

from acctmgr.domain.models import OPENING_BALANCE, Money


class LedgerStore:
    """Sole holder of the current balance, in cents, for one session."""

    def __init__(self, opening_balance: Money = OPENING_BALANCE) -> None:
        self._balance = opening_balance

    def read(self) -> Money:
        """Return the current balance."""
        return self._balance

    def write(self, new_balance: Money) -> None:
        """Replace the current balance.

        Args:
            new_balance: New balance in cents. Not validated.
        """
        self._balance = new_balance

    @property
    def balance(self) -> Money:
        return self._balance
