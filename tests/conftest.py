"""
Shared fixtures.

The whole suite runs against an in-memory SQLite database. DATABASE_URL is
set before anything from `storefront` is imported so the engine is built for
it; every test starts with freshly created tables.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "INFO")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

from storefront.database import engine
from storefront.main import app
from storefront.models.customer import Customer
from storefront.models.product import Product, ProductCategory


@pytest.fixture(autouse=True)
def reset_database():
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def test_client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


def _insert(row):
    with Session(engine) as session:
        session.add(row)
        session.commit()
        session.refresh(row)
        return row


@pytest.fixture
def make_customer():
    """Insert a customer row and return its id."""
    counter = {"n": 0}

    def _make(first_name: str = "Ada", last_name: str = "Lovelace") -> int:
        counter["n"] += 1
        customer = _insert(
            Customer(
                first_name=first_name,
                last_name=last_name,
                email=f"customer{counter['n']}@example.com",
                address="12 Analytical Engine Street",
            )
        )
        return customer.id

    return _make


@pytest.fixture
def make_product():
    """Insert a product row and return its id."""

    def _make(
        name: str = "Keyboard",
        price: float = 49.5,
        category: ProductCategory = ProductCategory.TECH,
        rating: float | None = 4.0,
    ) -> int:
        product = _insert(Product(name=name, price=price, category=category, rating=rating))
        return product.id

    return _make
