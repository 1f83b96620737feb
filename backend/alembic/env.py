"""Alembic environment for the petclinic schema."""

from __future__ import annotations

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from petclinic.core.config import settings  # noqa: E402
from petclinic.db.base import Base  # noqa: E402
import petclinic.db.models  # noqa: E402,F401

alembic_cfg = context.config
if alembic_cfg.config_file_name:
    fileConfig(alembic_cfg.config_file_name)


def _database_url() -> str:
    # An explicit PETCLINIC_DATABASE_URL overrides the sqlalchemy.url in alembic.ini.
    if os.environ.get("PETCLINIC_DATABASE_URL"):
        return settings.database_url
    return alembic_cfg.get_main_option("sqlalchemy.url") or settings.database_url


def _configure_and_run(**options) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **options)
    with context.begin_transaction():
        context.run_migrations()


def main() -> None:
    url = _database_url()
    if context.is_offline_mode():
        _configure_and_run(url=url, literal_binds=True, render_as_batch=url.startswith("sqlite"))
        return

    engine = create_engine(url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            # SQLite needs batch mode to alter constraints.
            _configure_and_run(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
    finally:
        engine.dispose()


main()
