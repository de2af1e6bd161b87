"""Pytest fixtures for quote validation testing.

Provides reusable test fixtures for:
- In-memory SQLite database session
- Seeded store/website/inventory reference data
- FastAPI test client with the database dependency overridden

Usage:
    def test_validate_endpoint(client, seeded_db):
        response = client.post("/api/v1/quotes/validate", json={...})
        assert response.status_code == 200
"""

import os

# Set environment variables BEFORE any imports to ensure they take effect
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")

from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from models import (
    Base,
    Website,
    Store,
    InventorySource,
    InventorySourceItem,
    InventoryStock,
    InventorySourceStockLink,
    InventoryStockSalesChannel,
)
from database import get_db


@pytest.fixture
def db_engine():
    """Create a fresh in-memory SQLite engine with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Generator[Session, None, None]:
    """Database session bound to the in-memory engine."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db_session: Session) -> Session:
    """Seed reference data for pickup validation.

    - website 'base' with store 1, website 'outlet' with store 2
    - stock 'Main Stock' assigned to website 'base'
    - 'outlet' website has no stock
    - sources: STORE1 (Downtown, pickup active), STORE2 (Uptown, pickup inactive),
      WH1 (warehouse, disabled), STORE9 (Airport, not linked to any stock)
    - STORE1 stock: ABC qty 5 enabled, DEF qty 10 disabled, GHI qty 1 enabled
    """
    base = Website(website_id=1, code="base", name="Main Website")
    outlet = Website(website_id=2, code="outlet", name="Outlet Website")
    db_session.add_all([base, outlet])
    db_session.add_all([
        Store(store_id=1, code="default", website_id=1, name="Default Store View"),
        Store(store_id=2, code="outlet_en", website_id=2, name="Outlet Store View"),
    ])

    db_session.add_all([
        InventorySource(
            source_code="STORE1",
            name="Downtown",
            enabled=True,
            is_pickup_location_active=True,
            city="Berlin",
            street="Hauptstrasse 1",
            postcode="10115",
            country_id="DE",
            phone="+49 30 123456",
        ),
        InventorySource(source_code="STORE2", name="Uptown", enabled=True, is_pickup_location_active=False),
        InventorySource(source_code="WH1", name="Warehouse", enabled=False, is_pickup_location_active=True),
        InventorySource(source_code="STORE9", name="Airport", enabled=True, is_pickup_location_active=True),
    ])

    db_session.add(InventoryStock(stock_id=1, name="Main Stock"))
    db_session.add_all([
        InventorySourceStockLink(stock_id=1, source_code="STORE1", priority=1),
        InventorySourceStockLink(stock_id=1, source_code="STORE2", priority=2),
        InventorySourceStockLink(stock_id=1, source_code="WH1", priority=3),
    ])
    db_session.add(InventoryStockSalesChannel(type="website", code="base", stock_id=1))

    db_session.add_all([
        InventorySourceItem(source_code="STORE1", sku="ABC", quantity=Decimal("5"), status=1),
        InventorySourceItem(source_code="STORE1", sku="DEF", quantity=Decimal("10"), status=0),
        InventorySourceItem(source_code="STORE1", sku="GHI", quantity=Decimal("1"), status=1),
        InventorySourceItem(source_code="STORE2", sku="ABC", quantity=Decimal("100"), status=1),
    ])

    db_session.commit()
    return db_session


@pytest.fixture
def client(seeded_db: Session) -> Generator[TestClient, None, None]:
    """FastAPI test client backed by the seeded in-memory database."""
    from main import app

    def override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
