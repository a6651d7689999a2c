from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Enum
from sqlalchemy.orm import relationship

from app.database import Base, generate_id, utcnow
from app.schemas import MONEY_DIGITS, MONEY_PLACES
from app.finance.enums import TransactionType


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=generate_id)
    account_id = Column(
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    amount = Column(Numeric(MONEY_DIGITS, MONEY_PLACES, asdecimal=True), nullable=False)
    # derived from the sign of amount
    type = Column(Enum(TransactionType, name="transaction_type"), nullable=False)
    description = Column(String, nullable=True)
    category_id = Column(
        String(36),
        ForeignKey("categories.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )

    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    account = relationship("Account", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")
