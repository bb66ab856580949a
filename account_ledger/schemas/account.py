"""
Pydantic schemas for account queries and error payloads.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BalanceResponse(BaseModel):
    """Response for an account balance query."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    account_number: int
    holder_name: str
    queried_at: datetime
    balance: Decimal


class ErrorResponse(BaseModel):
    """Error payload shared by every endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    tipo: str = Field(alias="Tipo")
    mensagem: str = Field(alias="Mensagem")
