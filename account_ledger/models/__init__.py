"""
Database models package.

All models must be imported here so that they are registered
on Base.metadata before the schema is created.
"""

from account_ledger.models.base import Base
from account_ledger.models.enums import MovementKind
from account_ledger.models.account import Account
from account_ledger.models.movement import Movement
from account_ledger.models.idempotency import IdempotencyRecord

__all__ = [
    "Base",
    "MovementKind",
    "Account",
    "Movement",
    "IdempotencyRecord",
]
