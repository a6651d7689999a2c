from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.users.auth import get_current_user_id
from . import schemas, service

router = APIRouter()


@router.post("", response_model=schemas.TransactionOut, status_code=status.HTTP_201_CREATED)
def create_transaction(
    account_id: str,
    transaction: schemas.TransactionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.create_transaction(db, account_id, transaction, user_id)


@router.get("", response_model=schemas.TransactionList)
def list_transactions(
    account_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.list_transactions(db, account_id, user_id)


@router.get("/{transaction_id}", response_model=schemas.TransactionOut)
def get_transaction(
    account_id: str,
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.get_transaction(db, account_id, transaction_id, user_id)


@router.put("/{transaction_id}", response_model=schemas.TransactionOut)
def update_transaction(
    account_id: str,
    transaction_id: str,
    transaction: schemas.TransactionUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.update_transaction(db, account_id, transaction_id, transaction, user_id)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    account_id: str,
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    service.delete_transaction(db, account_id, transaction_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
