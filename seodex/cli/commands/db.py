"""Database management commands."""

import cyclopts

from seodex.cli.console import Console
from seodex.config import Config, configure_logging
from seodex.infrastructure.persistence.migrate import current_revision, run_migrations

app = cyclopts.App(name="db", help="Database management")


@app.command
def upgrade(revision: str = "head") -> None:
    """Apply pending schema migrations.

    Args:
        revision: Target revision.
    """
    config = Config()
    configure_logging(config.logging)
    run_migrations(config.database.url, revision)
    Console().success(f"Database is at {revision}")


@app.command
def current() -> None:
    """Show the schema revision of the configured database."""
    config = Config()
    revision = current_revision(config.database.url)
    if revision is None:
        Console().warning("Database has no schema yet, run: seodex db upgrade")
        return
    Console().print(revision)
