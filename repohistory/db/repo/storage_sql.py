"""SQLAlchemy-backed implementation of RepositoryStorage."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from repohistory.db.engine import get_session
from repohistory.db.models import RepositoryRow
from repohistory.db.repo.errors import StorageError, ValidationError
from repohistory.db.repo.repository_storage import RepositoryStorage
from repohistory.db.repo.schemas import RepositoryEntry


class SqlAlchemyRepositoryStorage(RepositoryStorage):
    """Stores each key's entries as rows ordered by `position` (0 = most recent)."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("repohistory")

    def load(self, key: str) -> list[RepositoryEntry]:
        if not key:
            raise ValidationError("key is required")
        try:
            with get_session() as s:
                stmt = select(RepositoryRow).where(RepositoryRow.key == key).order_by(RepositoryRow.position.asc())
                rows = s.execute(stmt).scalars().all()
                # copy out while the session is open
                entries = [RepositoryEntry(path=r.path, category=r.category) for r in rows]
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        self.logger.debug("sql load key=%s count=%s", key, len(entries))
        return entries

    def save(self, key: str, entries: Sequence[RepositoryEntry]) -> None:
        if not key:
            raise ValidationError("key is required")
        if any(e.path is None for e in entries):
            raise ValidationError("path is required for every entry")

        try:
            with get_session() as s:
                s.execute(delete(RepositoryRow).where(RepositoryRow.key == key))
                s.add_all(
                    RepositoryRow(key=key, position=i, path=e.path, category=e.category) for i, e in enumerate(entries)
                )
                s.commit()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        self.logger.debug("sql save key=%s count=%s", key, len(entries))
