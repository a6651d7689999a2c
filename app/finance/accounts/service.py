from decimal import Decimal

from loguru import logger
from sqlalchemy.orm import Session, joinedload

from app.database import commit_or_rollback
from app.exceptions import NotFoundError
from app.finance import guard, validation
from app.finance.enums import Currency, supported_values
from app.finance.transactions.models import Transaction
from . import models, schemas

RECENT_TRANSACTIONS_LIMIT = 50

DUPLICATE_NAME = "An account with this name already exists for the user."


def list_currencies():
    return {"currencies": supported_values(Currency)}


# =========================
# Create Account
# =========================
def create_account(db: Session, account: schemas.AccountCreate, user_id: str):
    validation.require_fields(
        [account.name, account.currency],
        "Name and currency are required to create an account.",
    )
    currency = validation.validate_currency(account.currency)
    name = account.name.strip()

    validation.ensure_unique(
        db, models.Account, models.Account.user_id, user_id, name, DUPLICATE_NAME
    )

    new_account = models.Account(
        user_id=user_id,
        name=name,
        currency=currency,
        balance=Decimal("0"),
    )
    db.add(new_account)
    commit_or_rollback(db, DUPLICATE_NAME)
    db.refresh(new_account)

    logger.info(f"Account {new_account.id} created for user {user_id}")
    return new_account


# =========================
# List / Get
# =========================
def list_accounts(db: Session, user_id: str):
    accounts = (
        db.query(models.Account)
        .filter(models.Account.user_id == user_id)
        .order_by(models.Account.created_at)
        .all()
    )
    if not accounts:
        raise NotFoundError("No accounts found for this user.")
    return accounts


def get_account_detail(db: Session, account_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)

    recent = (
        db.query(Transaction)
        .options(joinedload(Transaction.category))
        .filter(Transaction.account_id == account.id)
        .order_by(Transaction.created_at.desc())
        .limit(RECENT_TRANSACTIONS_LIMIT)
        .all()
    )

    return {
        "id": account.id,
        "name": account.name,
        "balance": account.balance,
        "currency": account.currency,
        "transactions": recent,
        "created_at": account.created_at,
        "updated_at": account.updated_at,
    }


# =========================
# Update Account
# =========================
def update_account(db: Session, account_id: str, account_data: schemas.AccountUpdate, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)

    if validation.is_present(account_data.currency):
        validation.validate_currency(account_data.currency)

    validation.require_any_field(
        [account_data.name, account_data.currency],
        "At least one field (name or currency) must be provided for update.",
    )

    if validation.is_present(account_data.name):
        name = account_data.name.strip()
        validation.ensure_unique(
            db,
            models.Account,
            models.Account.user_id,
            user_id,
            name,
            DUPLICATE_NAME,
            exclude_id=account.id,
        )
        account.name = name

    if validation.is_present(account_data.currency):
        account.currency = Currency(account_data.currency)

    commit_or_rollback(db, DUPLICATE_NAME)
    db.refresh(account)

    logger.info(f"Account {account.id} updated")
    return {"account": account}


# =========================
# Delete Account
# =========================
def delete_account(db: Session, account_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)

    # categories and transactions go in the same commit
    db.delete(account)
    commit_or_rollback(db)

    logger.info(f"Account {account_id} deleted with its categories and transactions")
