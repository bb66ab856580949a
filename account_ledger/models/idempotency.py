"""
Idempotency record model.

One row per request key the ledger has accepted. The primary
key on request_key is what stops two concurrent submissions of
the same request from both producing a movement.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from account_ledger.models.base import Base


class IdempotencyRecord(Base):
    """
    Maps a caller-supplied request key to the movement it produced.

    serialized_request is kept for audit and debugging only.
    It is never parsed back.
    """

    __tablename__ = "idempotency"

    request_key: Mapped[str] = mapped_column(String(100), primary_key=True)
    serialized_request: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    result_value: Mapped[str] = mapped_column(String(1000), nullable=False)

    def __repr__(self) -> str:
        return f"<IdempotencyRecord {self.request_key} -> {self.result_value}>"
