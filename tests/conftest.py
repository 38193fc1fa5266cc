# tests/conftest.py

import os

# Keep the application engine in memory; it is never used by the tests directly
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from app.database.session import Base, build_engine, get_db
from app.models.product import Product
from app.services.analytics.engine import TransactionAnalytics


SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "description": "Your perfect pack for everyday use",
        "price": 109.95,
        "category": "men's clothing",
        "date_of_sale": datetime(2023, 3, 5, 10, 0),
        "sold": True,
    },
    {
        "id": 2,
        "title": "Mens Casual T-Shirt",
        "description": "Slim-fitting style",
        "price": 22.3,
        "category": "men's clothing",
        "date_of_sale": datetime(2023, 3, 18, 8, 30),
        "sold": False,
    },
    {
        "id": 3,
        "title": "John Hardy Bracelet",
        "description": "Gold bracelet from the Naga collection",
        "price": 695.0,
        "category": "jewelery",
        "date_of_sale": datetime(2023, 3, 27, 14, 15),
        "sold": True,
    },
    {
        "id": 4,
        "title": "Samsung 49-Inch Monitor",
        "description": "Super ultrawide gaming monitor",
        "price": 999.99,
        "category": "electronics",
        "date_of_sale": datetime(2023, 4, 2, 9, 0),
        "sold": False,
    },
    {
        "id": 5,
        "title": "WD 2TB Hard Drive",
        "description": "USB 3.0 and USB 2.0 compatibility",
        "price": 64.0,
        "category": "electronics",
        "date_of_sale": datetime(2022, 3, 15, 16, 45),
        "sold": True,
    },
    {
        "id": 6,
        "title": "Silicon Power SSD",
        "description": "3D NAND flash",
        "price": 123.0,
        "category": "electronics",
        "date_of_sale": datetime(2023, 11, 9, 11, 20),
        "sold": False,
    },
    {
        "id": 7,
        "title": "Rain Jacket Women",
        "description": "Lightweight windbreaker",
        "price": 39.99,
        "category": "women's clothing",
        "date_of_sale": datetime(2023, 3, 30, 19, 5),
        "sold": False,
    },
]


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    test_engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()


@pytest.fixture
def add_products(db_session: Session):
    """Insert product dicts in order and return the ORM rows."""
    def _add(records):
        rows = [Product(**record) for record in records]
        db_session.add_all(rows)
        db_session.commit()
        return rows

    return _add


@pytest.fixture
def sample_products(add_products):
    return add_products(SAMPLE_PRODUCTS)


@pytest.fixture
def analytics(db_session: Session) -> TransactionAnalytics:
    return TransactionAnalytics(db_session, sales_year=2023)


@pytest.fixture
def client(db_session: Session):
    """Create a test client bound to the test session."""
    from app.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()
