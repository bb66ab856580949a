"""
Balance aggregator.

The balance is never stored. It is recomputed from the full
movement history on every query, so it always reflects the
latest committed movements: credits add, debits subtract.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from account_ledger.errors import LedgerError
from account_ledger.models.enums import MovementKind
from account_ledger.models.movement import Movement
from account_ledger.services.account_validator import AccountValidator
from account_ledger.services.ledger_store import LedgerStore
from account_ledger.services.results import BalanceSnapshot, ServiceResult

logger = logging.getLogger(__name__)


def fold_movements(movements: list[Movement]) -> Decimal:
    """Signed sum of movement amounts. An empty history is zero."""
    total = Decimal("0")
    for movement in movements:
        if movement.kind == MovementKind.CREDIT:
            total += movement.amount
        else:
            total -= movement.amount
    return total


class BalanceAggregator:

    def __init__(
        self,
        store: LedgerStore,
        validator: AccountValidator | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.validator = validator or AccountValidator(store)
        self.now = now

    def compute_balance(self, account_id: str) -> ServiceResult[BalanceSnapshot]:
        try:
            account = self.validator.validate(account_id)
            movements = self.store.list_movements(account.id)
        except LedgerError as e:
            logger.warning(
                f"Balance query rejected: {e.message}",
                extra={"account_id": account_id, "error_code": e.code},
            )
            return ServiceResult.failure(e)

        return ServiceResult.success(BalanceSnapshot(
            account_number=account.number,
            holder_name=account.name,
            queried_at=self.now(),
            balance=fold_movements(movements),
        ))

    def list_movements(self, account_id: str) -> ServiceResult[list[Movement]]:
        """Movement history of an active account, oldest first."""
        try:
            account = self.validator.validate(account_id)
            return ServiceResult.success(self.store.list_movements(account.id))
        except LedgerError as e:
            logger.warning(
                f"Movement history query rejected: {e.message}",
                extra={"account_id": account_id, "error_code": e.code},
            )
            return ServiceResult.failure(e)
