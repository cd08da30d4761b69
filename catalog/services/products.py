"""
Сервис товаров.

CRUD операции над товарами и их значениями атрибутов. Все записи
выполняются в одной транзакции: либо применяются все изменения,
либо ни одного.
"""

import logging
from typing import Iterable, List, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.core.errors import NotFoundError, ValidationError
from catalog.db.database import transaction
from catalog.db.models import MAX_ID, Attribute, Category, Product, ProductAttribute
from catalog.schemas.product import AttributeAssignmentOut, CategoryOut, ProductIn, ProductOut
from catalog.services.filters import ProductFilter, build_product_query
from catalog.services.reconcile import dedupe_assignments, reconcile_attributes

logger = logging.getLogger(__name__)


def attributes_string(product: Product) -> str:
    """
    Строка атрибутов для отображения: "Size: L; Color: Blue".
    """
    return "; ".join(f"{pa.attribute.name}: {pa.value}" for pa in product.attributes)


def to_product_out(product: Product) -> ProductOut:
    """Преобразовать ORM товар в схему ответа."""
    return ProductOut(
        id=product.id,
        name=product.name,
        price=product.price,
        description=product.description,
        category_id=product.category_id,
        category=CategoryOut.model_validate(product.category) if product.category else None,
        attributes=[
            AttributeAssignmentOut(
                id=pa.id,
                attribute_id=pa.attribute_id,
                name=pa.attribute.name,
                value=pa.value,
            )
            for pa in product.attributes
        ],
        attributes_string=attributes_string(product),
    )


def list_products(db: Session, filters: ProductFilter) -> Sequence[Product]:
    """
    Получить товары, удовлетворяющие всем заданным фильтрам.

    Args:
        db: Сессия базы данных
        filters: Параметры фильтрации и сортировки

    Returns:
        Sequence[Product]: Товары в порядке сортировки
    """
    return db.scalars(build_product_query(filters)).unique().all()


def get_product(db: Session, product_id: int) -> Product:
    """
    Получить товар по ID.

    Raises:
        NotFoundError: Если товар не найден
    """
    # ID вне диапазона столбца не может существовать
    if not 1 <= product_id <= MAX_ID:
        raise NotFoundError("Product not found")
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def create_product(db: Session, payload: ProductIn) -> Product:
    """
    Создать товар вместе со значениями атрибутов.

    Повторы attribute_id в запросе схлопываются (побеждает последнее значение).

    Raises:
        ValidationError: Если категория или атрибуты не существуют
    """
    assignments = dedupe_assignments(payload.assignments())
    _check_category(db, payload.category_id)
    _check_attributes(db, (a for a, _ in assignments))

    product = Product(
        name=payload.name,
        price=payload.price,
        description=payload.description,
        category_id=payload.category_id,
    )
    product.attributes = [
        ProductAttribute(attribute_id=attribute_id, value=value)
        for attribute_id, value in assignments
    ]

    with transaction(db):
        db.add(product)

    db.refresh(product)
    logger.info(
        "Created product %s with %d attribute(s)", product.id, len(assignments)
    )
    return product


def update_product(db: Session, product_id: int, payload: ProductIn) -> Product:
    """
    Обновить поля товара и сверить набор его атрибутов.

    Присланный список атрибутов считается полным: отсутствующие
    в нем значения удаляются, новые добавляются, остальные перезаписываются.

    Raises:
        NotFoundError: Если товар не найден
        ValidationError: Если категория или атрибуты не существуют
    """
    product = get_product(db, product_id)
    _check_category(db, payload.category_id)

    current = [(pa.attribute_id, pa.value) for pa in product.attributes]
    diff = reconcile_attributes(current, payload.assignments())
    _check_attributes(db, (a for a, _ in diff.to_add))

    by_attribute = {pa.attribute_id: pa for pa in product.attributes}

    with transaction(db):
        product.name = payload.name
        product.price = payload.price
        product.description = payload.description
        product.category_id = payload.category_id

        for attribute_id in diff.to_remove:
            product.attributes.remove(by_attribute[attribute_id])
        for attribute_id, value in diff.to_update:
            by_attribute[attribute_id].value = value
        for attribute_id, value in diff.to_add:
            product.attributes.append(
                ProductAttribute(attribute_id=attribute_id, value=value)
            )

    db.refresh(product)
    logger.info(
        "Updated product %s: %d added, %d updated (%d changed), %d removed",
        product.id,
        len(diff.to_add),
        len(diff.to_update),
        len(diff.changed),
        len(diff.to_remove),
    )
    return product


def delete_product(db: Session, product_id: int) -> None:
    """
    Удалить товар и все его значения атрибутов.

    Raises:
        NotFoundError: Если товар не найден
    """
    product = get_product(db, product_id)

    with transaction(db):
        # Сначала связующие строки, затем сам товар
        product.attributes.clear()
        db.flush()
        db.delete(product)

    logger.info("Deleted product %s", product_id)


def list_product_attributes(db: Session, product_id: int) -> List[ProductAttribute]:
    """Значения атрибутов по ID товара (пустой список, если их нет)."""
    if not 1 <= product_id <= MAX_ID:
        return []
    stmt = (
        select(ProductAttribute)
        .where(ProductAttribute.product_id == product_id)
        .order_by(ProductAttribute.id)
    )
    return list(db.scalars(stmt).all())


def _check_category(db: Session, category_id: int) -> None:
    if not 1 <= category_id <= MAX_ID:
        raise ValidationError(f"Unknown category ID: {category_id}")
    if db.get(Category, category_id) is None:
        raise ValidationError(f"Unknown category ID: {category_id}")


def _check_attributes(db: Session, attribute_ids: Iterable[int]) -> None:
    wanted = set(attribute_ids)
    if not wanted:
        return
    found = set(db.scalars(select(Attribute.id).where(Attribute.id.in_(wanted))).all())
    missing = sorted(wanted - found)
    if missing:
        raise ValidationError(
            f"Unknown attribute ID(s): {', '.join(str(m) for m in missing)}"
        )
