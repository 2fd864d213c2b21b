"""Startup wiring: settings, logging, schema upgrade and the history manager."""

from __future__ import annotations

from repohistory.db import migrate as db_migrate
from repohistory.db.repo.repository_storage import RepositoryStorage
from repohistory.db.repo.storage_sql import SqlAlchemyRepositoryStorage
from repohistory.history_manager import RepositoryHistoryManager
from repohistory.logging_utils import setup_logging
from repohistory.settings import AppSettings, history_size_accessor

LOG_ENABLED = True
LOG_FILE = None
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3


def create_manager(
    *,
    settings: AppSettings | None = None,
    storage: RepositoryStorage | None = None,
    migrate: bool = True,
) -> RepositoryHistoryManager:
    """
    Build a RepositoryHistoryManager the way a host app does on start.

    Without an explicit `storage` the SQLite-backed one is used and, when `migrate`
    is set, the schema is upgraded to the Alembic head first.
    """
    settings = settings or AppSettings.from_env()
    logger = setup_logging(
        enabled=LOG_ENABLED,
        debug=settings.debug,
        file_path=LOG_FILE,
        max_bytes=LOG_MAX_BYTES,
        backups=LOG_BACKUPS,
    )

    if storage is None:
        if migrate:
            db_migrate.upgrade_to_head()
        storage = SqlAlchemyRepositoryStorage(logger=logger)

    logger.debug("history manager ready, limit=%s", settings.recent_repositories_history_size)
    return RepositoryHistoryManager(storage, max_history_size=history_size_accessor(settings), logger=logger)
