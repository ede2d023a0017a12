"""Unit tests for simple_repository/infrastructure/database.py.

Tests cover Settings defaults, env var override, lazy engine and session
factory construction.  No database connection is required.
"""

import inspect

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

import simple_repository
from simple_repository.infrastructure import database
from simple_repository.infrastructure.database import (
    Base,
    Settings,
    get_engine,
    get_session,
    get_sessionmaker,
    get_settings,
)


@pytest.fixture(autouse=True)
def _fresh_caches():
    for factory in (get_settings, get_engine, get_sessionmaker):
        factory.cache_clear()
    yield
    for factory in (get_settings, get_engine, get_sessionmaker):
        factory.cache_clear()


def test_settings_default_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "postgresql+asyncpg" in Settings(_env_file=None).database_url


def test_settings_default_url_targets_localhost(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "localhost" in Settings(_env_file=None).database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_echo_defaults_off(monkeypatch):
    monkeypatch.delenv("DATABASE_ECHO", raising=False)
    assert Settings(_env_file=None).database_echo is False


def test_settings_reads_echo_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_ECHO", "true")
    assert Settings().database_echo is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_built_from_settings(monkeypatch):
    created = {}

    def _fake_create(url, **kwargs):
        created.update(url=url, **kwargs)
        return "engine"

    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@dbhost/app")
    monkeypatch.setattr(database, "create_async_engine", _fake_create)
    assert get_engine() == "engine"
    assert created["url"] == "postgresql+asyncpg://u:p@dbhost/app"
    assert created["pool_pre_ping"] is True


def test_engine_is_async():
    assert isinstance(get_engine(), AsyncEngine)


def test_session_factory_produces_async_sessions():
    factory = get_sessionmaker()
    assert isinstance(factory, async_sessionmaker)
    assert factory.class_ is AsyncSession
    assert factory is get_sessionmaker()


def test_get_session_is_async_generator():
    assert inspect.isasyncgenfunction(get_session)


def test_database_wiring_is_exported_from_package():
    assert simple_repository.Base is Base
    assert simple_repository.Settings is Settings
    assert simple_repository.get_session is get_session
