"""
Главный модуль FastAPI приложения Product Catalog API.

Содержит сборку приложения: объект доступа к БД, middleware,
обработчики ошибок и роутеры.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.api.v1.routers import api_router
from catalog.core.config import Settings, get_settings
from catalog.core.errors import CatalogError
from catalog.core.logging_config import configure_logging
from catalog.db.database import Database

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Собрать экземпляр приложения.

    Args:
        settings: Настройки (по умолчанию из окружения)
        database: Готовый объект доступа к БД (по умолчанию создается по DATABASE_URL)

    Returns:
        FastAPI: Настроенное приложение
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    owns_database = database is None
    if owns_database:
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Product Catalog API started")
        yield
        if owns_database:
            database.dispose()
        logger.info("Product Catalog API stopped")

    # Создание экземпляра FastAPI приложения
    app = FastAPI(
        title="Product Catalog API",
        description="API для управления каталогом товаров, категориями и атрибутами",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.db = database
    app.state.settings = settings

    # Настройка CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz():
        """
        Health check endpoint для мониторинга состояния приложения.

        Returns:
            dict: Статус приложения
        """
        return {"status": "ok", "service": "Product Catalog API", "version": "1.0.0"}

    # Подключение API роутеров
    app.include_router(api_router, prefix="/api/v1")

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Перевод исключений в HTTP ответы вида {"detail": "..."}."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid request", "errors": jsonable_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            "Database error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"detail": "Database error"})


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
