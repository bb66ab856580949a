"""
Tests for the LedgerStore, IdempotencyGuard and AccountValidator.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from account_ledger.errors import (
    AccountInactive,
    AccountNotFound,
    PersistenceFailure,
)
from account_ledger.models import IdempotencyRecord, Movement, MovementKind
from account_ledger.services.account_validator import AccountValidator
from account_ledger.services.idempotency_guard import IdempotencyGuard
from account_ledger.services.ledger_store import LedgerStore


def make_movement(account_id, movement_id="M1", amount="10", kind=MovementKind.CREDIT):
    return Movement(
        id=movement_id,
        account_id=account_id,
        movement_date=date(2024, 3, 15),
        kind=kind,
        amount=Decimal(amount),
    )


class TestLedgerStore:

    def test_get_missing_account_returns_none(self, db_session):
        assert LedgerStore(db_session).get_account("NOPE") is None

    def test_staged_rows_written_on_flush(self, db_session, active_account):
        store = LedgerStore(db_session)
        store.add_movement(make_movement(active_account.id))
        store.flush()
        store.commit()

        assert [m.id for m in store.list_movements(active_account.id)] == ["M1"]

    def test_list_movements_keeps_insertion_order_on_same_timestamp(
        self, db_session, active_account
    ):
        store = LedgerStore(db_session)
        same_instant = datetime(2024, 3, 15, 12, 0, 0)
        for movement_id in ("Z-LAST-BY-ID", "A-FIRST-BY-ID", "M-MIDDLE"):
            movement = make_movement(active_account.id, movement_id)
            movement.created_at = same_instant
            store.add_movement(movement)
            store.flush()
        store.commit()

        ids = [m.id for m in store.list_movements(active_account.id)]

        assert ids == ["Z-LAST-BY-ID", "A-FIRST-BY-ID", "M-MIDDLE"]

    def test_list_movements_for_account_without_history(
        self, db_session, active_account
    ):
        assert LedgerStore(db_session).list_movements(active_account.id) == []

    def test_database_error_becomes_persistence_failure(
        self, db_session, monkeypatch
    ):
        store = LedgerStore(db_session)

        def broken_get(*args, **kwargs):
            raise OperationalError("SELECT ...", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db_session, "get", broken_get)

        with pytest.raises(PersistenceFailure) as exc_info:
            store.get_account("A1")

        assert exc_info.value.code == "PERSISTENCE_FAILURE"
        assert exc_info.value.http_status == 500
        # No query text in the client-facing message
        assert "SELECT" not in exc_info.value.message


class TestIdempotencyGuard:

    def test_unknown_key_is_not_a_replay(self, db_session):
        assert IdempotencyGuard(LedgerStore(db_session)).check_replay("K1") is None

    def test_recorded_key_replays_result(self, db_session, active_account):
        store = LedgerStore(db_session)
        guard = IdempotencyGuard(store)
        store.add_movement(make_movement(active_account.id))
        guard.record("K1", '{"requestKey": "K1"}', "M1")
        store.commit()

        assert guard.check_replay("K1") == "M1"

    def test_duplicate_record_fails_and_discards_movement(
        self, db_session, session_factory, active_account
    ):
        account_id = active_account.id
        store = LedgerStore(db_session)
        store.add_movement(make_movement(account_id, "M1"))
        IdempotencyGuard(store).record("K1", "{}", "M1")
        store.commit()

        other_session = session_factory()
        try:
            other_store = LedgerStore(other_session)
            other_store.add_movement(make_movement(account_id, "M2"))
            with pytest.raises(PersistenceFailure):
                IdempotencyGuard(other_store).record("K1", "{}", "M2")
        finally:
            other_session.close()

        ids = [m.id for m in store.list_movements(account_id)]
        assert ids == ["M1"]
        assert db_session.get(IdempotencyRecord, "K1").result_value == "M1"


class TestAccountValidator:

    def test_active_account_returned(self, db_session, active_account):
        account = AccountValidator(LedgerStore(db_session)).validate(
            active_account.id
        )
        assert account.number == 123

    def test_missing_account(self, db_session):
        with pytest.raises(AccountNotFound) as exc_info:
            AccountValidator(LedgerStore(db_session)).validate("NOPE")

        assert exc_info.value.account_id == "NOPE"
        assert exc_info.value.to_response() == {
            "Tipo": "INVALID_ACCOUNT",
            "Mensagem": "Conta corrente não cadastrada",
        }

    def test_inactive_account(self, db_session, inactive_account):
        with pytest.raises(AccountInactive) as exc_info:
            AccountValidator(LedgerStore(db_session)).validate(
                inactive_account.id
            )

        assert exc_info.value.code == "INACTIVE_ACCOUNT"
