"""
API endpoints для определений атрибутов.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from catalog.db.database import get_db
from catalog.schemas.attribute import AttributeCreate, AttributeOut
from catalog.services import attributes as attribute_service

router = APIRouter()


@router.get("", response_model=List[AttributeOut])
def list_attributes(db: Session = Depends(get_db)):
    return attribute_service.list_attributes(db)


@router.post("", response_model=AttributeOut, status_code=status.HTTP_201_CREATED)
def create_attribute(
    payload: AttributeCreate, response: Response, db: Session = Depends(get_db)
):
    """
    Создать атрибут по названию.

    Если атрибут с таким названием уже существует, возвращает его с кодом 200.

    Raises:
        ValidationError: Если название не передано
    """
    attribute, created = attribute_service.create_attribute(db, payload.name)
    if not created:
        response.status_code = status.HTTP_200_OK
    return attribute
