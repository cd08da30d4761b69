"""
Модель товара.
"""

from typing import List, Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Product(Base):
    """
    Модель товара.

    Attributes:
        id: Уникальный идентификатор товара
        category_id: ID категории товара
        name: Название товара
        price: Цена
        description: Описание товара
        category: Связь с категорией
        attributes: Связь со значениями атрибутов товара
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="RESTRICT"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))
    price: Mapped[float] = mapped_column(Float)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Связи с другими моделями
    category: Mapped["Category"] = relationship(
        back_populates="products", lazy="joined"
    )
    attributes: Mapped[List["ProductAttribute"]] = relationship(
        back_populates="product",
        cascade="all,delete-orphan",
        lazy="selectin",
        order_by="ProductAttribute.id",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"
