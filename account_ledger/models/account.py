"""
Current account model.

Accounts are provisioned outside this service. The ledger only
reads them: to check that a movement targets an existing,
active account and to label balance snapshots.
"""

from sqlalchemy import String, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from account_ledger.models.base import Base


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(37), primary_key=True)
    number: Mapped[int] = mapped_column(
        Integer, unique=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    movements: Mapped[list["Movement"]] = relationship(
        back_populates="account"
    )

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"<Account {self.number} {self.name} ({state})>"
