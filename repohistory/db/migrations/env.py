"""Alembic environment for the repository history schema (online upgrades only)."""

from __future__ import annotations

from alembic import context
from sqlalchemy import create_engine, pool

from repohistory.db.models import Base
from repohistory.db.paths import db_path

url = context.config.get_main_option("sqlalchemy.url") or f"sqlite:///{db_path().as_posix()}"
connectable = create_engine(url, poolclass=pool.NullPool)

with connectable.connect() as connection:
    # batch mode: SQLite can't ALTER most things in place
    context.configure(connection=connection, target_metadata=Base.metadata, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()
