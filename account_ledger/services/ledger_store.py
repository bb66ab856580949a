"""
Ledger store: the only code that reads or writes ledger rows.

The store wraps a SQLAlchemy session supplied by the caller.
It never commits on its own except through commit(), so the
caller controls the transaction boundary. Any SQLAlchemy error
is rolled back and re-raised as PersistenceFailure, which keeps
query text and driver details out of client responses.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from account_ledger.errors import PersistenceFailure
from account_ledger.models.account import Account
from account_ledger.models.idempotency import IdempotencyRecord
from account_ledger.models.movement import Movement

logger = logging.getLogger(__name__)


class LedgerStore:

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _translate_errors(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Store operation '{operation}' failed: {e}",
                extra={"error_code": PersistenceFailure.code},
            )
            raise PersistenceFailure(operation) from e

    # --- Reads ---

    def get_account(self, account_id: str) -> Account | None:
        with self._translate_errors("get_account"):
            return self.db.get(Account, account_id)

    def get_idempotency_record(
        self, request_key: str
    ) -> IdempotencyRecord | None:
        with self._translate_errors("get_idempotency_record"):
            return self.db.get(IdempotencyRecord, request_key)

    def list_movements(self, account_id: str) -> list[Movement]:
        """
        Return every movement for an account in insertion order.

        No pagination: the balance fold needs the full history.
        """
        with self._translate_errors("list_movements"):
            movements = self.db.execute(
                select(Movement)
                .where(Movement.account_id == account_id)
                .order_by(Movement.seq)
            ).scalars().all()
            return list(movements)

    # --- Writes ---

    def add_movement(self, movement: Movement) -> None:
        """Stage a movement. It is written by the next flush()."""
        self.db.add(movement)

    def add_idempotency_record(self, record: IdempotencyRecord) -> None:
        """Stage an idempotency record. It is written by the next flush()."""
        self.db.add(record)

    def flush(self) -> None:
        """
        Send staged rows to the database.

        A movement and its idempotency record are flushed together,
        so a duplicate request key rejects both.
        """
        with self._translate_errors("flush"):
            self.db.flush()

    def commit(self) -> None:
        with self._translate_errors("commit"):
            self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
