"""Lifespan — engine created and checked on startup, disposed on shutdown."""

import pytest

import catalog.infrastructure.database as db_module
import catalog.main as main_module
from catalog.config import Settings
from catalog.infrastructure.database import DatabaseSessionManager


@pytest.fixture
def memory_settings(monkeypatch):
    settings = Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text",
    )
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(db_module, "db_manager", None)
    return settings


async def test_lifespan_connects_and_disposes(memory_settings):
    async with main_module.lifespan(main_module.app):
        assert db_module.db_manager is not None
        assert await db_module.db_manager.health_check() is True
    assert db_module.db_manager is None


async def test_lifespan_fails_fast_when_database_unreachable(memory_settings, monkeypatch):
    async def unreachable(self):
        return False

    monkeypatch.setattr(DatabaseSessionManager, "health_check", unreachable)
    with pytest.raises(RuntimeError, match="Database unreachable"):
        async with main_module.lifespan(main_module.app):
            pass
    assert db_module.db_manager is None
