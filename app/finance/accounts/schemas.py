from datetime import datetime
from typing import List, Optional

from app.finance.enums import Currency
from app.finance.transactions.schemas import TransactionSummary
from app.schemas import CamelSchema, Money


class AccountCreate(CamelSchema):
    name: Optional[str] = None
    currency: Optional[str] = None


class AccountUpdate(CamelSchema):
    name: Optional[str] = None
    currency: Optional[str] = None


class AccountSummary(CamelSchema):
    id: str
    name: str
    balance: Money
    currency: Currency


class AccountOut(AccountSummary):
    user_id: str
    created_at: datetime
    updated_at: datetime


class AccountDetail(AccountSummary):
    transactions: List[TransactionSummary] = []
    created_at: datetime
    updated_at: datetime


class AccountEnvelope(CamelSchema):
    account: AccountOut


class CurrencyList(CamelSchema):
    currencies: List[str]
