"""
Account query endpoints: balance and movement history.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from account_ledger.api.error_handlers import error_response
from account_ledger.models.base import get_db
from account_ledger.schemas.account import BalanceResponse, ErrorResponse
from account_ledger.schemas.movement import MovementResponse
from account_ledger.services.balance_aggregator import BalanceAggregator
from account_ledger.services.ledger_store import LedgerStore

router = APIRouter(
    prefix="/accounts",
    tags=["Accounts"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("/{account_id}/balance", response_model=BalanceResponse)
def get_balance(
    account_id: str,
    db: Session = Depends(get_db),
):
    """
    Get the current balance of an active account.

    Balance is calculated from movements, not stored. Like every
    Decimal field in this API it is sent as a JSON string, so
    clients get the exact value (e.g. "50.2500").
    """
    result = BalanceAggregator(LedgerStore(db)).compute_balance(account_id)
    if not result.is_success:
        return error_response(result.error)

    snapshot = result.value
    return BalanceResponse(
        account_number=snapshot.account_number,
        holder_name=snapshot.holder_name,
        queried_at=snapshot.queried_at,
        balance=snapshot.balance,
    )


@router.get("/{account_id}/movements", response_model=list[MovementResponse])
def get_movements(
    account_id: str,
    db: Session = Depends(get_db),
):
    """Get all movements of an active account, oldest first."""
    result = BalanceAggregator(LedgerStore(db)).list_movements(account_id)
    if not result.is_success:
        return error_response(result.error)
    return result.value
