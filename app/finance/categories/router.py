from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.users.auth import get_current_user_id
from . import schemas, service

router = APIRouter()


# ================= CREATE =================
@router.post("", response_model=schemas.CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(
    account_id: str,
    category: schemas.CategoryCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.create_category(db, account_id, category, user_id)


# ================= LIST =================
@router.get("", response_model=schemas.CategoryList)
def list_categories(
    account_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.list_categories(db, account_id, user_id)


@router.get("/{category_id}", response_model=schemas.CategoryOut)
def get_category(
    account_id: str,
    category_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.get_category(db, account_id, category_id, user_id)


# ================= UPDATE =================
@router.put("/{category_id}", response_model=schemas.CategoryOut)
def update_category(
    account_id: str,
    category_id: str,
    category: schemas.CategoryUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return service.update_category(db, account_id, category_id, category, user_id)


# ================= DELETE =================
@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    account_id: str,
    category_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    service.delete_category(db, account_id, category_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
