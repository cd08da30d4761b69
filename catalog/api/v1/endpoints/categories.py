"""
API endpoints для работы с категориями товаров.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog.db.database import get_db
from catalog.schemas.category import CategoryCreate
from catalog.schemas.product import CategoryOut
from catalog.services import categories as category_service

router = APIRouter()


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    """
    Получить список всех категорий.

    Example:
        [
            {"id": 2, "name": "Clothing"},
            {"id": 1, "name": "Electronics"}
        ]
    """
    return category_service.list_categories(db)


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    """
    Создать новую категорию.

    Raises:
        ValidationError: Если название не передано
        ConflictError: Если категория с таким названием уже есть
    """
    return category_service.create_category(db, payload.name)
