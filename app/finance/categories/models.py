from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base, generate_id, utcnow
from app.finance.enums import CategoryDomain


class Category(Base):
    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("account_id", "name", name="uq_categories_account_name"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    account_id = Column(
        String(36),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name = Column(String(100), nullable=False)
    # a label only; not checked against transaction signs
    domain = Column(Enum(CategoryDomain, name="category_domain"), nullable=False)
    description = Column(String, nullable=False, default="")

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    account = relationship("Account", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category")
