"""Store layer - holds the balance for the lifetime of a session."""

from acctmgr.store.ledger import LedgerStore

__all__ = ["LedgerStore"]
