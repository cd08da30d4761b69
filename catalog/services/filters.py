"""
Композиция фильтров для списка товаров.

Собирает один предикат (логическое И) из необязательных фильтров
и порядок сортировки для запроса SQLAlchemy.
"""

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Literal, Optional

from sqlalchemy import Select, and_, asc, desc, select

from catalog.core.errors import ValidationError
from catalog.db.models import MAX_ID, Attribute, Product, ProductAttribute

SortField = Literal["name", "price"]
SortOrder = Literal["asc", "desc"]

SORT_COLUMNS = {"name": Product.name, "price": Product.price}


@dataclass(frozen=True)
class ProductFilter:
    """
    Параметры фильтрации и сортировки товаров.

    Attributes:
        search: Подстрока в названии (без учета регистра)
        price_from: Минимальная цена (включительно)
        price_to: Максимальная цена (включительно)
        category_id: Фильтр по категории
        attribute_names: Товар должен иметь каждый из этих атрибутов
        sort: Поле сортировки (name/price)
        order: Направление сортировки (asc/desc)
    """

    search: Optional[str] = None
    price_from: Optional[float] = None
    price_to: Optional[float] = None
    category_id: Optional[int] = None
    attribute_names: FrozenSet[str] = field(default_factory=frozenset)
    sort: Optional[SortField] = None
    order: SortOrder = "asc"

    @classmethod
    def from_query(
        cls,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
        price_from: Optional[str] = None,
        price_to: Optional[str] = None,
        category_id: Optional[str] = None,
        attribute_names: Optional[str] = None,
    ) -> "ProductFilter":
        """
        Разобрать сырые строковые параметры запроса.

        Пустые строки считаются отсутствующими фильтрами, поисковая
        строка передается как есть, attribute_names разделяются запятыми.

        Raises:
            ValidationError: Если число или поле сортировки некорректны
        """
        sort = _blank_to_none(sort)
        order = _blank_to_none(order)
        if sort is not None and sort not in SORT_COLUMNS:
            raise ValidationError(f"Unsupported sort field: {sort}")
        if order is not None and order not in ("asc", "desc"):
            raise ValidationError(f"Unsupported sort order: {order}")

        return cls(
            search=search if search and search.strip() else None,
            price_from=_parse_number(price_from, "priceFrom", float),
            price_to=_parse_number(price_to, "priceTo", float),
            category_id=_parse_number(category_id, "categoryId", int),
            attribute_names=_split_names(attribute_names),
            sort=sort,
            order=order or "asc",
        )


def build_product_query(filters: ProductFilter) -> Select:
    """
    Построить запрос списка товаров.

    Отсутствующие фильтры не добавляют условий. По нескольким
    attribute_names используется И: товар должен иметь каждый атрибут.
    Равные по полю сортировки товары упорядочены по id.

    Args:
        filters: Параметры фильтрации и сортировки

    Returns:
        Select: Запрос SQLAlchemy, выбирающий Product
    """
    conditions = []
    if filters.search:
        conditions.append(Product.name.ilike(f"%{_escape_like(filters.search)}%", escape="\\"))
    if filters.price_from is not None:
        conditions.append(Product.price >= filters.price_from)
    if filters.price_to is not None:
        conditions.append(Product.price <= filters.price_to)
    if filters.category_id is not None:
        conditions.append(Product.category_id == filters.category_id)
    for name in sorted(filters.attribute_names):
        conditions.append(
            Product.attributes.any(ProductAttribute.attribute.has(Attribute.name == name))
        )

    stmt = select(Product)
    if conditions:
        stmt = stmt.where(and_(*conditions))

    if filters.sort is not None:
        column = SORT_COLUMNS[filters.sort]
        stmt = stmt.order_by(desc(column) if filters.order == "desc" else asc(column))
    return stmt.order_by(Product.id)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_number(value: Optional[str], name: str, kind):
    value = _blank_to_none(value)
    if value is None:
        return None
    try:
        number = kind(value)
    except ValueError:
        raise ValidationError(f"{name} must be a number")
    if kind is float and not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number")
    if kind is int and not 1 <= number <= MAX_ID:
        raise ValidationError(f"{name} is out of range")
    return number


def _split_names(value: Optional[str]) -> FrozenSet[str]:
    if not value:
        return frozenset()
    parts: Iterable[str] = (p.strip() for p in value.split(","))
    return frozenset(p for p in parts if p)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
