from datetime import datetime
from typing import List, Optional

from app.finance.categories.schemas import CategoryRef
from app.finance.enums import TransactionType
from app.schemas import Amount, CamelSchema, Money


# =========================
# Create
# =========================
class TransactionCreate(CamelSchema):
    amount: Optional[Amount] = None
    description: Optional[str] = None
    category_id: Optional[str] = None


# =========================
# Update
# =========================
class TransactionUpdate(CamelSchema):
    amount: Optional[Amount] = None
    description: Optional[str] = None
    category_id: Optional[str] = None


# =========================
# Output
# =========================
class TransactionSummary(CamelSchema):
    id: str
    amount: Money
    description: Optional[str] = None
    type: TransactionType
    created_at: datetime
    category: Optional[CategoryRef] = None


class TransactionOut(TransactionSummary):
    account_id: str
    category_id: Optional[str] = None
    updated_at: datetime


class TransactionList(CamelSchema):
    transactions: List[TransactionSummary]
