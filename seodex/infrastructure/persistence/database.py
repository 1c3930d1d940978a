"""Async engine and session factory."""

from pathlib import Path
from typing import Any

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from seodex.config import DatabaseConfig


def _is_memory(url: URL) -> bool:
    return url.database in (None, "", ":memory:")


def _prepare_sqlite_file(url: URL) -> URL:
    """Absolute, ~-expanded database path whose directory exists."""
    path = Path(url.database or "").expanduser().absolute()
    path.parent.mkdir(parents=True, exist_ok=True)
    return url.set(database=str(path))


def _engine_options(url: URL, echo: bool) -> dict[str, Any]:
    if url.get_backend_name() != "sqlite":
        return {"echo": echo, "pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}

    options: dict[str, Any] = {"echo": echo, "connect_args": {"check_same_thread": False}}
    if _is_memory(url):
        # Every session must see the same in-memory database
        options["poolclass"] = StaticPool
    return options


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    url = make_url(config.url)
    if url.get_backend_name() == "sqlite" and not _is_memory(url):
        url = _prepare_sqlite_file(url)
    return create_async_engine(url, **_engine_options(url, config.echo))


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
