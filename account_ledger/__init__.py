"""Account ledger: idempotent movements and derived balances."""

__version__ = "0.1.0"
