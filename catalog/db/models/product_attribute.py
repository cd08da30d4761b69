"""
Модель значения атрибута у товара (связующая таблица).
"""

from sqlalchemy import ForeignKey, Index, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class ProductAttribute(Base):
    """
    Значение атрибута у конкретного товара.

    На один товар приходится не более одной строки на атрибут.

    Attributes:
        id: Уникальный идентификатор строки
        product_id: ID товара
        attribute_id: ID атрибута
        value: Значение атрибута
        product: Связь с товаром
        attribute: Связь с определением атрибута
    """

    __tablename__ = "product_attributes"

    __table_args__ = (
        UniqueConstraint("product_id", "attribute_id", name="uq_product_attribute"),
        Index("ix_product_attributes_product_id", "product_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE")
    )
    attribute_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("attributes.id", ondelete="RESTRICT"), index=True
    )
    value: Mapped[str] = mapped_column(Text)

    product: Mapped["Product"] = relationship(back_populates="attributes")
    attribute: Mapped["Attribute"] = relationship(
        back_populates="assignments", lazy="joined"
    )

    def __repr__(self) -> str:
        return (
            f"<ProductAttribute(product_id={self.product_id}, "
            f"attribute_id={self.attribute_id}, value='{self.value}')>"
        )
