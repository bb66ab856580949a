"""
Return types shared by the ledger services.

Services report business and persistence failures as a tagged
ServiceResult instead of raising across the service boundary.
The API layer decides how each failure kind maps to HTTP.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from account_ledger.errors import LedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value or the LedgerError that prevented it."""

    value: T | None = None
    error: LedgerError | None = None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> "ServiceResult[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BalanceSnapshot:
    """
    Balance of an account at query time.

    Derived from the movements on every query, never stored.
    """

    account_number: int
    holder_name: str
    queried_at: datetime
    balance: Decimal
