"""
Модель определения атрибута (например, "Size" или "Color").
"""

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Attribute(Base):
    """
    Модель атрибута.

    Attributes:
        id: Уникальный идентификатор атрибута
        name: Название атрибута, уникально в пределах каталога
        assignments: Значения этого атрибута у товаров
    """

    __tablename__ = "attributes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)

    assignments: Mapped[List["ProductAttribute"]] = relationship(
        back_populates="attribute"
    )

    def __repr__(self) -> str:
        return f"<Attribute(id={self.id}, name='{self.name}')>"
