"""Shared fixtures: in-memory SQLite database and FastAPI test client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from catalog.core.config import Settings
from catalog.db.database import Database
from catalog.db.models import Attribute, Category, Product, ProductAttribute
from catalog.main import create_app


@pytest.fixture
def database():
    """Fresh in-memory database shared across connections."""
    db = Database("sqlite://", poolclass=StaticPool)
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def session(database):
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(database):
    """Create FastAPI test client bound to the in-memory database."""
    settings = Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def catalog_data(session):
    """Two categories, three attributes and a few products.

    Returns a dict of ids keyed by a short name.
    """
    clothing = Category(name="Clothing")
    electronics = Category(name="Electronics")
    size = Attribute(name="Size")
    color = Attribute(name="Color")
    sale = Attribute(name="Sale")
    session.add_all([clothing, electronics, size, color, sale])
    session.flush()

    t_shirt = Product(name="T-Shirt", price=19.99, category_id=clothing.id)
    t_shirt.attributes = [
        ProductAttribute(attribute_id=size.id, value="L"),
        ProductAttribute(attribute_id=color.id, value="Blue"),
    ]
    hoodie = Product(name="Hoodie", price=39.99, category_id=clothing.id)
    hoodie.attributes = [ProductAttribute(attribute_id=size.id, value="M")]
    headphones = Product(name="Headphones", price=89.5, category_id=electronics.id)
    headphones.attributes = [
        ProductAttribute(attribute_id=color.id, value="Black"),
        ProductAttribute(attribute_id=sale.id, value="yes"),
    ]
    session.add_all([t_shirt, hoodie, headphones])
    session.commit()

    return {
        "clothing": clothing.id,
        "electronics": electronics.id,
        "size": size.id,
        "color": color.id,
        "sale": sale.id,
        "t_shirt": t_shirt.id,
        "hoodie": hoodie.id,
        "headphones": headphones.id,
    }
