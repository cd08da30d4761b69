"""
API endpoints для работы с товарами.

Содержит CRUD операции для товаров с поддержкой фильтрации
и сортировки, а также сверку набора атрибутов при обновлении.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from catalog.db.database import get_db
from catalog.schemas.product import AttributeAssignmentOut, ProductIn, ProductOut
from catalog.services import products as product_service
from catalog.services.filters import ProductFilter

router = APIRouter()


@router.get("", response_model=List[ProductOut])
def list_products(
    db: Session = Depends(get_db),
    search: Optional[str] = Query(None, description="Поиск по названию (без учета регистра)"),
    sort: Optional[str] = Query(None, description="Поле для сортировки: name/price"),
    order: Optional[str] = Query(None, description="Направление сортировки: asc/desc"),
    price_from: Optional[str] = Query(None, alias="priceFrom", description="Минимальная цена"),
    price_to: Optional[str] = Query(None, alias="priceTo", description="Максимальная цена"),
    category_id: Optional[str] = Query(None, alias="categoryId", description="Фильтр по категории"),
    attribute_names: Optional[str] = Query(
        None,
        alias="attributeNames",
        description="Названия атрибутов через запятую (товар должен иметь каждый)",
    ),
):
    """
    Получить список товаров с фильтрацией и сортировкой.

    Все переданные фильтры объединяются через И. Пустые параметры
    игнорируются. Каждый товар дополнен строкой attributesString
    вида "Size: L; Color: Blue".

    Returns:
        List[ProductOut]: Товары, удовлетворяющие всем фильтрам

    Raises:
        ValidationError: При некорректных числах или поле сортировки
    """
    filters = ProductFilter.from_query(
        search=search,
        sort=sort,
        order=order,
        price_from=price_from,
        price_to=price_to,
        category_id=category_id,
        attribute_names=attribute_names,
    )
    rows = product_service.list_products(db, filters)
    return [product_service.to_product_out(p) for p in rows]


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    """
    Создать новый товар.

    Ожидает JSON:
    {
      "name": "T-Shirt",
      "price": 19.99,
      "categoryId": 2,
      "description": "...",
      "attributes": [{"attributeId": 1, "value": "L"}, ...]
    }
    """
    product = product_service.create_product(db, payload)
    return product_service.to_product_out(product)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    """
    Получить товар по ID.

    Raises:
        NotFoundError: Если товар не найден
    """
    return product_service.to_product_out(product_service.get_product(db, product_id))


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    """
    Обновить товар.

    Список attributes в теле считается полным набором атрибутов товара:
    новые добавляются, существующие перезаписываются, отсутствующие удаляются.
    Все изменения применяются в одной транзакции.
    """
    product = product_service.update_product(db, product_id, payload)
    return product_service.to_product_out(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """
    Удалить товар вместе со значениями его атрибутов.
    """
    product_service.delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{product_id}/attributes", response_model=List[AttributeAssignmentOut])
def list_product_attributes(product_id: int, db: Session = Depends(get_db)):
    """
    Получить значения атрибутов по ID товара.

    Для несуществующего (в том числе удаленного) товара возвращает пустой список.
    """
    return [
        AttributeAssignmentOut(
            id=pa.id, attribute_id=pa.attribute_id, name=pa.attribute.name, value=pa.value
        )
        for pa in product_service.list_product_attributes(db, product_id)
    ]
