"""
Сервис определений атрибутов.
"""

import logging
from typing import Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.core.errors import ValidationError
from catalog.db.database import transaction
from catalog.db.models import Attribute

logger = logging.getLogger(__name__)


def list_attributes(db: Session) -> Sequence[Attribute]:
    return db.scalars(select(Attribute).order_by(Attribute.id)).all()


def create_attribute(db: Session, name: Optional[str]) -> Tuple[Attribute, bool]:
    """
    Создать атрибут по названию.

    Названия атрибутов уникальны в каталоге: если атрибут с таким
    названием уже есть, возвращается существующий.

    Args:
        db: Сессия базы данных
        name: Название атрибута

    Returns:
        Tuple[Attribute, bool]: Атрибут и признак того, что он создан

    Raises:
        ValidationError: Если название не передано или пустое
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Attribute name is required")

    existing = db.scalar(select(Attribute).where(Attribute.name == name))
    if existing is not None:
        return existing, False

    attribute = Attribute(name=name)
    try:
        with transaction(db):
            db.add(attribute)
    except IntegrityError:
        # Параллельный запрос успел создать атрибут с тем же названием
        existing = db.scalar(select(Attribute).where(Attribute.name == name))
        if existing is None:
            raise
        return existing, False

    logger.info("Created attribute %s (%s)", attribute.id, attribute.name)
    return attribute, True
