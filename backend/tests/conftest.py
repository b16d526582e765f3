import os

# in-memory SQLite for the whole run; must be set before supplychain.core.db is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from supplychain.core.db import engine, SessionLocal
from supplychain.services.schema_service import create_schema, drop_schema
from supplychain.services.seed_service import seed_demo
from supplychain.services.record_service import create_record


@pytest.fixture(autouse=True)
def fresh_schema():
    drop_schema(engine)
    create_schema(engine)
    yield


@pytest.fixture
def db(fresh_schema):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def demo_db(db):
    seed_demo(db)
    return db


@pytest.fixture
def client(fresh_schema):
    from supplychain.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make(db):
    """make("suppliers", name=..., ...) -> inserted row"""
    def _make(entity, **values):
        return create_record(db, entity, values)
    return _make


@pytest.fixture
def supplier(make):
    return make("suppliers", name="ElectroWorld", region="Asia", email="sales@electroworld.com")


@pytest.fixture
def warehouse(make):
    return make("warehouses", location="Shanghai")


@pytest.fixture
def customer(make):
    return make("customers", name="Alice Martin", loyalty_status="Gold")


@pytest.fixture
def product(make, supplier):
    return make("products", name="Phone", category="Electronics", unit_price=200, supplier_id=supplier.id)
