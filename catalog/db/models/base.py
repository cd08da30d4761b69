"""
Базовый класс для всех моделей SQLAlchemy.

Использует Declarative API SQLAlchemy 2.0 и единые имена ограничений.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Верхняя граница значений столбцов Integer (ID)
MAX_ID = 2**31 - 1

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """
    Базовый класс для всех моделей каталога.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
