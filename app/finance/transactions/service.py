"""
Transaction mutations and the account balance they maintain.

Every mutation runs as one unit of work:

    locate owning account (row locked) -> validate -> compute delta
    -> write transaction -> apply delta to balance -> single commit

A failure before the commit leaves nothing behind, and a failed commit is
rolled back as a whole. Nothing here retries: replaying a delta would apply
it twice.
"""
from loguru import logger
from sqlalchemy.orm import Session, joinedload

from app.database import commit_or_rollback
from app.exceptions import ValidationError
from app.finance import balance, guard, validation
from . import models, schemas


def _load(db: Session, transaction_id: str):
    return (
        db.query(models.Transaction)
        .options(joinedload(models.Transaction.category))
        .filter(models.Transaction.id == transaction_id)
        .first()
    )


# =========================
# Read
# =========================
def list_transactions(db: Session, account_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)
    transactions = (
        db.query(models.Transaction)
        .options(joinedload(models.Transaction.category))
        .filter(models.Transaction.account_id == account.id)
        .order_by(models.Transaction.created_at.desc())
        .all()
    )
    return {"transactions": transactions}


def get_transaction(db: Session, account_id: str, transaction_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)
    guard.get_account_transaction(db, account.id, transaction_id)
    return _load(db, transaction_id)


# =========================
# Create
# =========================
def create_transaction(db: Session, account_id: str, data: schemas.TransactionCreate, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id, for_update=True)

    validation.require_fields([data.amount], "Amount is required to create a transaction.")

    if validation.is_present(data.category_id):
        guard.get_account_category(db, account.id, data.category_id)

    amount = balance.to_decimal(data.amount)
    transaction = models.Transaction(
        account_id=account.id,
        amount=amount,
        type=balance.derive_type(amount),
        description=data.description,
        category_id=data.category_id or None,
    )
    db.add(transaction)
    new_balance = balance.apply_delta(account, balance.create_delta(amount))

    commit_or_rollback(db)

    logger.info(
        f"Transaction {transaction.id} created in account {account.id}: "
        f"delta={amount} balance={new_balance}"
    )
    return _load(db, transaction.id)


# =========================
# Update
# =========================
def update_transaction(
    db: Session,
    account_id: str,
    transaction_id: str,
    data: schemas.TransactionUpdate,
    user_id: str,
):
    account = guard.get_owned_account(db, account_id, user_id, for_update=True)
    transaction = guard.get_account_transaction(db, account.id, transaction_id)

    # an explicit null clears description or category; a null amount is no change
    supplied = data.model_fields_set
    if data.amount is None and not supplied & {"description", "category_id"}:
        raise ValidationError(
            "At least one field (amount, description, categoryId) must be provided for update."
        )

    if validation.is_present(data.category_id):
        guard.get_account_category(db, account.id, data.category_id)

    delta = balance.update_delta(transaction.amount, data.amount)

    if data.amount is not None:
        new_amount = balance.to_decimal(data.amount)
        transaction.amount = new_amount
        transaction.type = balance.derive_type(new_amount)

    if "description" in supplied:
        transaction.description = data.description

    if "category_id" in supplied:
        transaction.category_id = data.category_id if validation.is_present(data.category_id) else None

    if data.amount is not None:
        balance.apply_delta(account, delta)

    commit_or_rollback(db)

    logger.info(f"Transaction {transaction_id} updated in account {account.id}: delta={delta}")
    return _load(db, transaction_id)


# =========================
# Delete
# =========================
def delete_transaction(db: Session, account_id: str, transaction_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id, for_update=True)
    transaction = guard.get_account_transaction(db, account.id, transaction_id)

    delta = balance.delete_delta(transaction.amount)
    db.delete(transaction)
    new_balance = balance.apply_delta(account, delta)

    commit_or_rollback(db)

    logger.info(
        f"Transaction {transaction_id} deleted from account {account.id}: "
        f"delta={delta} balance={new_balance}"
    )
