"""
Сервис категорий товаров.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.core.errors import ConflictError, ValidationError
from catalog.db.database import transaction
from catalog.db.models import Category

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> Sequence[Category]:
    """Все категории, отсортированные по названию."""
    return db.scalars(select(Category).order_by(Category.name)).all()


def create_category(db: Session, name: Optional[str]) -> Category:
    """
    Создать категорию.

    Raises:
        ValidationError: Если название не передано или пустое
        ConflictError: Если категория с таким названием уже существует
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Category name is required")

    if db.scalar(select(Category.id).where(Category.name == name)) is not None:
        raise ConflictError("Category with this name already exists")

    category = Category(name=name)
    try:
        with transaction(db):
            db.add(category)
    except IntegrityError:
        if db.scalar(select(Category.id).where(Category.name == name)) is None:
            raise
        raise ConflictError("Category with this name already exists")

    logger.info("Created category %s (%s)", category.id, category.name)
    return category
