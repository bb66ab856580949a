"""
Pydantic schemas for movement operations.

The wire format is camelCase (requestKey, accountId, ...);
snake_case field names are accepted too.

amount and kind are deliberately unconstrained here. Their
business rules (positive amount, C/D kind) are checked by the
MovementProcessor after the idempotency lookup, so a replayed
request is answered from the stored result and an invalid one
gets a ledger error code rather than a schema error.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from account_ledger.models.enums import MovementKind


class MovementRequest(BaseModel):
    """A credit or debit request against one account."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_key: str = Field(min_length=1, max_length=100)
    account_id: str = Field(min_length=1, max_length=37)
    amount: Decimal
    kind: str


class MovementResponse(BaseModel):
    """Single movement in API responses."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    account_id: str
    movement_date: date
    kind: MovementKind
    amount: Decimal
