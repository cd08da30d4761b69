"""
Модели базы данных.

Импортирует все модели для корректной работы SQLAlchemy.
"""

from .attribute import Attribute
from .base import MAX_ID, Base
from .category import Category
from .product import Product
from .product_attribute import ProductAttribute

__all__ = [
    "Base",
    "MAX_ID",
    "Attribute",
    "Category",
    "Product",
    "ProductAttribute",
]
