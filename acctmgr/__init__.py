"""acctmgr - a single-account console ledger."""

__version__ = "0.1.0"
