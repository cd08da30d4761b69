#!/usr/bin/env python3
"""
Скрипт для инициализации базы данных каталога.

Использование:
    python init_db.py          # создать таблицы
    python init_db.py --seed   # создать таблицы и демо-данные
"""

import argparse
import sys

from sqlalchemy import inspect, select

from catalog.core.config import get_settings
from catalog.db.database import Database, transaction
from catalog.db.models import Attribute, Category, Product, ProductAttribute


def seed(database: Database) -> None:
    """Заполнить каталог демо-данными (если он пуст)."""
    db = database.session_factory()
    try:
        if db.scalar(select(Category.id).limit(1)) is not None:
            print("ℹ️ Каталог уже содержит данные, пропускаем заполнение")
            return

        with transaction(db):
            electronics = Category(name="Electronics")
            clothing = Category(name="Clothing")
            size = Attribute(name="Size")
            color = Attribute(name="Color")
            sale = Attribute(name="Sale")
            db.add_all([electronics, clothing, size, color, sale])
            db.flush()

            t_shirt = Product(
                name="T-Shirt",
                price=19.99,
                description="A comfortable cotton t-shirt",
                category_id=clothing.id,
            )
            t_shirt.attributes = [
                ProductAttribute(attribute_id=size.id, value="L"),
                ProductAttribute(attribute_id=color.id, value="blue"),
                ProductAttribute(attribute_id=sale.id, value="yes"),
            ]
            db.add(t_shirt)

        print("✅ Демо-данные добавлены")
    finally:
        db.close()


def init_database(with_seed: bool = False) -> bool:
    """Создает все таблицы в базе данных."""
    print("🗄️ Инициализация базы данных...")
    settings = get_settings()
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)

    try:
        database.create_all()
        print("✅ Все таблицы созданы успешно!")

        tables = inspect(database.engine).get_table_names()
        print(f"📋 Таблиц в базе: {len(tables)}")
        for table in tables:
            print(f"  - {table}")

        if with_seed:
            seed(database)
        return True

    except Exception as e:
        print(f"❌ Ошибка инициализации базы данных: {e}")
        return False
    finally:
        database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Инициализация базы данных каталога")
    parser.add_argument("--seed", action="store_true", help="Добавить демо-данные")
    args = parser.parse_args()

    if not init_database(with_seed=args.seed):
        sys.exit(1)
