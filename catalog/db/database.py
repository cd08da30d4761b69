"""
Конфигурация базы данных.

Содержит объект доступа к БД (движок + фабрика сессий), зависимость
FastAPI для получения сессии на запрос и область транзакции.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from catalog.db.models import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Объект доступа к базе данных.

    Создается явно при сборке приложения и хранится в app.state.db,
    вместо глобального движка на уровне модуля.

    Attributes:
        engine: Движок SQLAlchemy
        session_factory: Фабрика сессий
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.engine: Engine = create_engine(url, echo=echo, future=True, **engine_kwargs)

        # SQLite по умолчанию не проверяет внешние ключи
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

    def create_all(self) -> None:
        """Создать все таблицы моделей."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def drop_all(self) -> None:
        """Удалить все таблицы моделей."""
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Generator[Session, None, None]:
        """
        Выдать сессию и гарантированно закрыть ее после использования.

        Yields:
            Session: Сессия SQLAlchemy
        """
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency для получения сессии базы данных.

    Yields:
        Session: Сессия SQLAlchemy, привязанная к текущему запросу

    Note:
        Автоматически закрывает сессию после использования
    """
    database: Database = request.app.state.db
    yield from database.session()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Область транзакции.

    Коммитит при успешном выходе из блока, откатывает и пробрасывает
    исключение при любой ошибке. Частичных изменений не остается.

    Example:
        with transaction(db):
            db.add(product)
    """
    try:
        yield db
        db.commit()
    except BaseException:
        db.rollback()
        logger.warning("Transaction rolled back")
        raise
