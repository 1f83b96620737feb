"""The Alembic environment builds the same schema the models declare."""

import io
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from petclinic.db.base import Base

BACKEND_DIR = Path(__file__).resolve().parents[1]


@pytest.fixture
def alembic_config(tmp_path, monkeypatch):
    monkeypatch.delenv("PETCLINIC_DATABASE_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = Config(stdout=io.StringIO(), output_buffer=io.StringIO())
    cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg, url


def test_upgrade_creates_every_table(alembic_config):
    cfg, url = alembic_config

    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert set(Base.metadata.tables) <= tables
    assert "alembic_version" in tables


def test_offline_upgrade_renders_sql(alembic_config):
    cfg, _ = alembic_config

    command.upgrade(cfg, "head", sql=True)

    sql = cfg.output_buffer.getvalue()
    assert "CREATE TABLE owners" in sql
    assert "CREATE TABLE visits" in sql
