"""
Movement processor: credits and debits against an account.

Each request:
1. Checks idempotency (has this request key been used before?)
2. Validates the account (exists, active)
3. Validates the amount (strictly positive)
4. Validates the kind (C or D, either case)
5. Stages the movement row
6. Records the idempotency entry, flushing both rows together
7. Returns the new movement id

The replay check runs before any validation: a key that already
has a result is answered with it even if the account has since
been deactivated or the replayed body is no longer valid.

The processor never commits. The caller commits on success and
rolls back on failure.
"""

import logging
import uuid
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable

from account_ledger.errors import (
    InvalidAmount,
    InvalidMovementType,
    LedgerError,
)
from account_ledger.models.enums import MovementKind
from account_ledger.models.movement import Movement
from account_ledger.schemas.movement import MovementRequest
from account_ledger.services.account_validator import AccountValidator
from account_ledger.services.idempotency_guard import IdempotencyGuard
from account_ledger.services.ledger_store import LedgerStore
from account_ledger.services.results import ServiceResult

logger = logging.getLogger(__name__)

# Matches the Numeric(19, 4) movements.amount column
AMOUNT_QUANTUM = Decimal("0.0001")
MAX_AMOUNT = Decimal("1E15")


class MovementProcessor:

    def __init__(
        self,
        store: LedgerStore,
        guard: IdempotencyGuard | None = None,
        validator: AccountValidator | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.guard = guard or IdempotencyGuard(store)
        self.validator = validator or AccountValidator(store)
        self.today = today

    def process(self, request: MovementRequest) -> ServiceResult[str]:
        """Apply a movement request at most once per request key."""
        try:
            movement_id = self._process(request)
        except LedgerError as e:
            logger.warning(
                f"Movement rejected: {e.message}",
                extra={
                    "request_key": request.request_key,
                    "account_id": request.account_id,
                    "error_code": e.code,
                },
            )
            return ServiceResult.failure(e)
        return ServiceResult.success(movement_id)

    def _process(self, request: MovementRequest) -> str:
        previous = self.guard.check_replay(request.request_key)
        if previous is not None:
            return previous

        account = self.validator.validate(request.account_id)
        self._validate_amount(request.amount)
        kind = self._validate_kind(request.kind)

        movement = Movement(
            id=str(uuid.uuid4()),
            account_id=account.id,
            movement_date=self.today(),
            kind=kind,
            amount=request.amount,
        )
        self.store.add_movement(movement)
        self.guard.record(
            request.request_key,
            request.model_dump_json(by_alias=True),
            movement.id,
        )

        logger.info(
            f"Movement {kind.value} {request.amount} accepted",
            extra={
                "request_key": request.request_key,
                "account_id": account.id,
                "movement_id": movement.id,
            },
        )
        return movement.id

    @staticmethod
    def _validate_amount(amount: Decimal) -> None:
        # Zero is rejected, not treated as a no-op
        if not amount.is_finite() or amount <= 0 or amount >= MAX_AMOUNT:
            raise InvalidAmount()
        # Finer than the stored scale would be rounded on write
        try:
            if amount != amount.quantize(AMOUNT_QUANTUM):
                raise InvalidAmount()
        except InvalidOperation:
            raise InvalidAmount()

    @staticmethod
    def _validate_kind(kind: str) -> MovementKind:
        parsed = MovementKind.parse(kind)
        if parsed is None:
            raise InvalidMovementType()
        return parsed
