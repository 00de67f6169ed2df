"""SQLAlchemy ORM models for the bank resource tables."""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    DateTime,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class AuditMixin:
    """Audit columns shared by every table."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    created_by: Mapped[str] = mapped_column(String(50), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    updated_by: Mapped[str | None] = mapped_column(String(50), nullable=True)


class CustomerModel(AuditMixin, Base):
    """Persisted customer record."""

    __tablename__ = "customer"

    customer_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mobile_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
    )

    account: Mapped["AccountModel | None"] = relationship(
        "AccountModel",
        back_populates="customer",
        uselist=False,
        cascade="all, delete-orphan",
    )


class AccountModel(AuditMixin, Base):
    """Persisted bank account, one per customer."""

    __tablename__ = "accounts"

    account_number: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=False,
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customer.customer_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    account_type: Mapped[str] = mapped_column(String(100), nullable=False)
    branch_address: Mapped[str] = mapped_column(String(200), nullable=False)

    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="account",
    )


class LoanModel(AuditMixin, Base):
    """Persisted loan record."""

    __tablename__ = "loans"

    loan_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    mobile_number: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
        unique=True,
    )
    loan_number: Mapped[str] = mapped_column(String(100), nullable=False)
    loan_type: Mapped[str] = mapped_column(String(100), nullable=False)
    total_loan: Mapped[int] = mapped_column(Integer, nullable=False)
    amount_paid: Mapped[int] = mapped_column(Integer, nullable=False)
    outstanding_amount: Mapped[int] = mapped_column(Integer, nullable=False)


class CardModel(AuditMixin, Base):
    """Persisted card record."""

    __tablename__ = "cards"

    card_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    mobile_number: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
        unique=True,
    )
    card_number: Mapped[str] = mapped_column(String(100), nullable=False)
    card_type: Mapped[str] = mapped_column(String(100), nullable=False)
    total_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    amount_used: Mapped[int] = mapped_column(Integer, nullable=False)
    available_amount: Mapped[int] = mapped_column(Integer, nullable=False)


# Tables owned by each service; a deployment only creates its own.
SERVICE_TABLES = {
    "accounts": [CustomerModel.__table__, AccountModel.__table__],
    "loans": [LoanModel.__table__],
    "cards": [CardModel.__table__],
}
