"""
Idempotency guard: answers repeated request keys from their
first result.
"""

import logging

from account_ledger.models.idempotency import IdempotencyRecord
from account_ledger.services.ledger_store import LedgerStore

logger = logging.getLogger(__name__)


class IdempotencyGuard:

    def __init__(self, store: LedgerStore):
        self.store = store

    def check_replay(self, request_key: str) -> str | None:
        """Return the stored result for a key seen before, else None."""
        record = self.store.get_idempotency_record(request_key)
        if record is None:
            return None
        logger.info(
            "Replaying stored result for request key",
            extra={"request_key": request_key, "movement_id": record.result_value},
        )
        return record.result_value

    def record(
        self, request_key: str, serialized_request: str, result_value: str
    ) -> None:
        """
        Persist the result for a first-seen key.

        Flushes together with whatever the caller has already
        staged (the movement row). If another request recorded the
        same key first, the primary key rejects this one and
        PersistenceFailure is raised with the session rolled back,
        so no second movement survives.
        """
        self.store.add_idempotency_record(IdempotencyRecord(
            request_key=request_key,
            serialized_request=serialized_request,
            result_value=result_value,
        ))
        self.store.flush()
