"""Alembic helpers for the schema.

Alembic is synchronous; these run before the event loop starts.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url

logger = logging.getLogger(__name__)

# Directory holding alembic.ini and migrations/
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Async driver -> the sync driver alembic connects with
_SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql",
}


def to_sync_url(database_url: str) -> str:
    """Swap the async driver for its sync counterpart and expand ~ in SQLite paths."""
    url = make_url(database_url)
    url = url.set(drivername=_SYNC_DRIVERS.get(url.drivername, url.drivername))
    if url.get_backend_name() == "sqlite" and url.database and url.database.startswith("~"):
        url = url.set(database=str(Path(url.database).expanduser()))
    return url.render_as_string(hide_password=False)


def get_alembic_config(database_url: str) -> AlembicConfig:
    config = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", to_sync_url(database_url))
    # configure_logging() already ran; alembic.ini must not replace its handlers
    config.attributes["configure_logger"] = False
    return config


def _ensure_sqlite_dir(sync_url: str) -> None:
    url = make_url(sync_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database to revision (default: latest)."""
    config = get_alembic_config(database_url)
    _ensure_sqlite_dir(config.get_main_option("sqlalchemy.url") or "")
    command.upgrade(config, revision)
    logger.info(f"Database upgraded to {revision}")


def current_revision(database_url: str) -> str | None:
    """Revision the database is at, or None before the first migration."""
    sync_url = to_sync_url(database_url)
    _ensure_sqlite_dir(sync_url)
    engine = create_engine(sync_url)
    try:
        with engine.connect() as connection:
            return MigrationContext.configure(connection).get_current_revision()
    finally:
        engine.dispose()
