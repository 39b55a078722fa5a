"""
Migration tests - Alembic revisions against a throwaway SQLite file.
Challenge: Migrations and models describe the same schema; every revision reverses cleanly.
"""

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config

from meetroom.db import models  # noqa: F401 - register every table
from meetroom.db.base import Base

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    return cfg


@pytest.fixture
def connection(tmp_path, alembic_config):
    engine = sa.create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    with engine.connect() as conn:
        alembic_config.attributes["connection"] = conn
        yield conn
    engine.dispose()


def _columns(conn, table: str) -> list[tuple[str, bool]]:
    return [(c["name"], c["nullable"]) for c in sa.inspect(conn).get_columns(table)]


def test_chat_type_round_trip(alembic_config, connection):
    command.upgrade(alembic_config, "001")
    before = _columns(connection, "Chats")
    assert "type" not in [name for name, _ in before]

    command.upgrade(alembic_config, "002")
    added = {c["name"]: c for c in sa.inspect(connection).get_columns("Chats")}["type"]
    assert added["nullable"] is True
    assert "chat" in str(added["default"])

    command.downgrade(alembic_config, "001")
    assert _columns(connection, "Chats") == before


def test_head_matches_models(alembic_config, connection):
    command.upgrade(alembic_config, "head")
    inspector = sa.inspect(connection)

    assert set(inspector.get_table_names()) - {"alembic_version"} == set(Base.metadata.tables)
    for name, table in Base.metadata.tables.items():
        migrated = {c["name"] for c in inspector.get_columns(name)}
        assert migrated == {c.name for c in table.columns}, name


def test_full_downgrade_removes_every_table(alembic_config, connection):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")
    assert set(sa.inspect(connection).get_table_names()) <= {"alembic_version"}
