"""Root conftest — async DB + FastAPI test client shared by every test layer.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency
      (ADR: PostgreSQL-specific features not exercised by the catalog)
    - StaticPool: in-memory SQLite is per-connection, every session must share one
"""

import os

# Ensure tests never point at a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import catalog.infrastructure.database as db_module
from catalog.db.base import Base
from catalog.infrastructure.database import DatabaseSessionManager, get_db
from catalog.main import app
from catalog.models.product import Product


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_products(test_db):
    """Three available products and one soft-deleted one."""
    products = [
        Product(name="Keyboard", price=49.9),
        Product(name="Mouse", price=19.5),
        Product(name="Monitor", price=189.0),
        Product(name="Retired cable", price=2.0, available=False),
    ]
    test_db.add_all(products)
    await test_db.commit()
    for product in products:
        await test_db.refresh(product)
    return products
