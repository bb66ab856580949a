"""
Movement API endpoints.

The API layer is thin: it builds the services around the
request's session, commits on success, rolls back on failure
and maps ledger errors to their HTTP status.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from account_ledger.api.error_handlers import error_response
from account_ledger.models.base import get_db
from account_ledger.schemas.account import ErrorResponse
from account_ledger.schemas.movement import MovementRequest
from account_ledger.services.ledger_store import LedgerStore
from account_ledger.services.movement_processor import MovementProcessor

router = APIRouter(prefix="/movements", tags=["Movements"])


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_movement(
    request: MovementRequest,
    db: Session = Depends(get_db),
):
    """
    Credit or debit an account.

    Returns the movement id as plain text. Repeating a request
    key returns the first movement id without writing anything.
    """
    store = LedgerStore(db)
    result = MovementProcessor(store).process(request)
    if not result.is_success:
        store.rollback()
        return error_response(result.error)

    store.commit()
    return PlainTextResponse(result.value)
