"""
Movement model.

A movement is a single credit or debit against an account.
Movements are immutable: once written they are never
modified or deleted. The balance is derived from them.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    String, Integer, Date, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from account_ledger.models.base import Base
from account_ledger.models.enums import MovementKind


class Movement(Base):
    """
    An immutable credit or debit.

    movement_date has day granularity only. seq is assigned by the
    database on insert and gives the order movements were accepted;
    id is the public movement identifier.
    """

    __tablename__ = "movements"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True)
    id: Mapped[str] = mapped_column(
        String(37), unique=True, nullable=False, index=True
    )
    account_id: Mapped[str] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    movement_date: Mapped[date] = mapped_column(Date, nullable=False)
    kind: Mapped[MovementKind] = mapped_column(
        SAEnum(
            MovementKind,
            name="movement_kind_enum",
            create_constraint=True,
            values_callable=lambda kinds: [k.value for k in kinds],
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    account: Mapped["Account"] = relationship(back_populates="movements")

    def __repr__(self) -> str:
        return f"<Movement {self.kind.value} {self.amount} on {self.account_id}>"
