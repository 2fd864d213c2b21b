"""Bring the history database up to the latest Alembic revision."""

from __future__ import annotations

from alembic import command
from alembic.config import Config

from .paths import alembic_dir, db_path


def upgrade_to_head() -> None:
    """Idempotent; run it once at start before the SQL storage is used."""
    cfg = Config()
    cfg.set_main_option("script_location", str(alembic_dir()))
    cfg.set_main_option("sqlalchemy.url", f"sqlite:///{db_path().as_posix()}")
    command.upgrade(cfg, "head")
