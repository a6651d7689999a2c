from decimal import Decimal

from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Enum, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base, generate_id, utcnow
from app.schemas import MONEY_DIGITS, MONEY_PLACES
from app.finance.enums import Currency


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_accounts_user_name"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name = Column(String(100), nullable=False)

    # maintained by app.finance.balance only
    balance = Column(
        Numeric(MONEY_DIGITS, MONEY_PLACES, asdecimal=True),
        nullable=False,
        default=Decimal("0"),
    )
    currency = Column(Enum(Currency, name="currency"), nullable=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="accounts")
    categories = relationship(
        "Category",
        back_populates="account",
        cascade="all, delete-orphan",
    )
    transactions = relationship(
        "Transaction",
        back_populates="account",
        cascade="all, delete-orphan",
    )
