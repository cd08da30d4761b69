"""
Основной роутер API v1.

Подключает все endpoint'ы приложения.
"""

from fastapi import APIRouter

from catalog.api.v1.endpoints import attributes, categories, products

# Создание основного роутера API v1
api_router = APIRouter()

# Подключение роутеров для различных ресурсов
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(attributes.router, prefix="/attributes", tags=["attributes"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
