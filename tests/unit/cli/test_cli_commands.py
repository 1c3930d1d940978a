"""End-to-end CLI runs against a migrated SQLite file."""

from datetime import UTC, datetime

import pytest
from sqlalchemy import create_engine, insert, select

from seodex.cli.main import app
from seodex.infrastructure.persistence.migrate import run_migrations, to_sync_url
from seodex.infrastructure.persistence.tables import (
    indexables_table,
    notifications_table,
    posts_table,
    scheduled_jobs_table,
    taxonomies_table,
    users_table,
)


def run_cli(*tokens: str) -> None:
    try:
        app(list(tokens))
    except SystemExit as e:
        if e.code not in (None, 0):
            raise


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'seodex.db'}"
    monkeypatch.setenv("SEODEX_DATABASE__URL", url)
    monkeypatch.setenv("SEODEX_SITE__HOME_URL", "https://example.org")
    monkeypatch.delenv("SEODEX_LOG_FILE", raising=False)
    monkeypatch.setenv("COLUMNS", "200")
    run_migrations(url)
    return url


@pytest.fixture
def sync_engine(database_url):
    engine = create_engine(to_sync_url(database_url))
    yield engine
    engine.dispose()


def test_taxonomy_check_records_then_reacts(sync_engine, capsys):
    with sync_engine.begin() as conn:
        conn.execute(
            insert(taxonomies_table),
            [
                {"name": "category", "label": "Categories", "public": True},
                {"name": "post_tag", "label": "Tags", "public": True},
            ],
        )

    run_cli("taxonomies", "check")
    assert "Recorded the current public taxonomies" in capsys.readouterr().out

    with sync_engine.begin() as conn:
        conn.execute(insert(taxonomies_table).values(name="genre", label="Genres", public=True))
        conn.execute(
            taxonomies_table.update()
            .where(taxonomies_table.c.name == "post_tag")
            .values(public=False)
        )

    run_cli("taxonomies", "check")
    out = capsys.readouterr().out
    assert "Made public: genre" in out
    assert "Made private: post_tag" in out

    with sync_engine.connect() as conn:
        notification_ids = conn.execute(select(notifications_table.c.id)).scalars().all()
        hooks = conn.execute(select(scheduled_jobs_table.c.hook)).scalars().all()
    assert notification_ids == ["taxonomies-made-public"]
    assert hooks == ["wpseo_start_cleanup_indexables"]


def test_taxonomy_status_after_changes(sync_engine, capsys):
    run_cli("taxonomies", "status")
    out = capsys.readouterr().out
    assert "Indexing reason: none" in out
    assert "Indexable cleanup: not scheduled" in out

    with sync_engine.begin() as conn:
        conn.execute(
            insert(taxonomies_table),
            [
                {"name": "category", "label": "Categories", "public": True},
                {"name": "post_tag", "label": "Tags", "public": True},
            ],
        )
    run_cli("taxonomies", "check")
    with sync_engine.begin() as conn:
        conn.execute(insert(taxonomies_table).values(name="genre", label="Genres", public=True))
        conn.execute(
            taxonomies_table.update()
            .where(taxonomies_table.c.name == "post_tag")
            .values(public=False)
        )
    run_cli("taxonomies", "check")
    capsys.readouterr()

    run_cli("taxonomies", "status")
    out = capsys.readouterr().out
    assert "Indexing reason: taxonomy_made_public" in out
    assert "Indexable cleanup: scheduled for" in out

def test_author_build_then_show(sync_engine, capsys):
    published = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
    with sync_engine.begin() as conn:
        conn.execute(
            insert(users_table).values(
                id=7, user_login="jane", user_nicename="jane", user_email="jane@example.org"
            )
        )
        conn.execute(
            insert(posts_table).values(
                id=1, post_author=7, post_date_gmt=published, post_modified_gmt=published
            )
        )

    run_cli("authors", "build", "7")
    assert "Built indexable" in capsys.readouterr().out

    with sync_engine.connect() as conn:
        row = conn.execute(select(indexables_table)).mappings().one()
    assert row["object_type"] == "user"
    assert row["permalink"] == "https://example.org/author/jane/"
    assert row["open_graph_image_source"] == "gravatar-image"
    assert row["version"] == 2

    run_cli("authors", "show", "7")
    assert "https://example.org/author/jane/" in capsys.readouterr().out


def test_author_without_posts_is_not_stored(sync_engine, capsys):
    with sync_engine.begin() as conn:
        conn.execute(insert(users_table).values(id=8, user_login="john", user_nicename="john"))

    run_cli("authors", "build", "8")
    assert "not eligible" in capsys.readouterr().out

    with sync_engine.connect() as conn:
        assert conn.execute(select(indexables_table)).first() is None


def test_show_unknown_author_exits_with_error(database_url, capsys):
    with pytest.raises(SystemExit) as exc_info:
        app(["authors", "show", "99"])

    assert exc_info.value.code == 1


def test_db_current_reports_head(database_url, capsys):
    run_cli("db", "current")

    assert "4b1f6c2a9e10" in capsys.readouterr().out
