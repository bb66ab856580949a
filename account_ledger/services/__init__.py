"""Business logic services."""

from account_ledger.services.ledger_store import LedgerStore
from account_ledger.services.idempotency_guard import IdempotencyGuard
from account_ledger.services.account_validator import AccountValidator
from account_ledger.services.movement_processor import MovementProcessor
from account_ledger.services.balance_aggregator import BalanceAggregator
from account_ledger.services.results import BalanceSnapshot, ServiceResult

__all__ = [
    "LedgerStore",
    "IdempotencyGuard",
    "AccountValidator",
    "MovementProcessor",
    "BalanceAggregator",
    "BalanceSnapshot",
    "ServiceResult",
]
