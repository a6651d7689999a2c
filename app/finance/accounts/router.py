from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.users.auth import get_current_user_id
from . import schemas, service

router = APIRouter()


@router.get("/currencies", response_model=schemas.CurrencyList)
def list_currencies(user_id: str = Depends(get_current_user_id)):
    return service.list_currencies()


# ----------------------------------------
# CREATE ACCOUNT
# ----------------------------------------
@router.post("/accounts", response_model=schemas.AccountOut, status_code=status.HTTP_201_CREATED)
def create_account(
    account: schemas.AccountCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.create_account(db, account, user_id)


# ----------------------------------------
# LIST ACCOUNTS
# ----------------------------------------
@router.get("/accounts", response_model=List[schemas.AccountSummary])
def list_accounts(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.list_accounts(db, user_id)


@router.get("/accounts/{account_id}", response_model=schemas.AccountDetail)
def get_account(
    account_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.get_account_detail(db, account_id, user_id)


# ----------------------------------------
# UPDATE ACCOUNT
# ----------------------------------------
@router.put("/accounts/{account_id}", response_model=schemas.AccountEnvelope)
def update_account(
    account_id: str,
    account: schemas.AccountUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.update_account(db, account_id, account, user_id)


# ----------------------------------------
# DELETE ACCOUNT
# ----------------------------------------
@router.delete("/accounts/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    account_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    service.delete_account(db, account_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
