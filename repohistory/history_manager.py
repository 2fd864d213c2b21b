"""Recent repositories history: ordering, dedup on add, removal and trimming."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from repohistory.db.repo.errors import ValidationError
from repohistory.db.repo.repository_storage import RepositoryStorage
from repohistory.db.repo.schemas import HISTORY_KEY, RepositoryEntry
from repohistory.settings import history_size_accessor

__all__ = ["RepositoryHistoryManager"]


def _trim(entries: Sequence[RepositoryEntry], size: int) -> list[RepositoryEntry]:
    return list(entries[: max(size, 0)])


def _index_of(entries: Sequence[RepositoryEntry], path: str) -> int:
    for i, entry in enumerate(entries):
        if entry.path == path:
            return i
    return -1


class RepositoryHistoryManager:
    """
    Keeps the MRU list of repositories (index 0 = most recent) in a RepositoryStorage.

    Holds no state between calls: every operation loads from storage and, when the
    list changed, saves it back. Storage calls run in a worker thread; they are the
    only await points. Concurrent callers are not serialized (last save wins).
    """

    def __init__(
        self,
        storage: RepositoryStorage,
        *,
        max_history_size: Callable[[], int] | None = None,
        logger: logging.Logger | None = None,
    ):
        self._storage = storage
        self._max_history_size = max_history_size or history_size_accessor()
        self.logger = logger or logging.getLogger("repohistory")

    async def _load(self) -> list[RepositoryEntry]:
        loaded = await asyncio.to_thread(self._storage.load, HISTORY_KEY)
        if not loaded:
            return []
        return loaded if isinstance(loaded, list) else list(loaded)

    async def _save(self, entries: list[RepositoryEntry]) -> None:
        await asyncio.to_thread(self._storage.save, HISTORY_KEY, entries)

    async def load_recent_history(self) -> list[RepositoryEntry]:
        """Return the stored history trimmed to the current size limit. Never writes back."""
        history = await self._load()
        size = self._max_history_size()
        self.logger.debug("load_recent_history stored=%s limit=%s", len(history), size)
        return _trim(history, size)

    async def add_as_most_recent(self, path: str) -> list[RepositoryEntry]:
        """
        Put `path` at index 0 and persist the result.

        Only the first existing occurrence of `path` is moved; later duplicates stay in place.
        The list is not trimmed here. When `path` is already the head nothing is saved.
        """
        if path is None:
            raise ValidationError("path must not be None")

        history = await self._load()
        if history and history[0].path == path:
            self.logger.debug("add_as_most_recent: already on top, save skipped")
            return history

        idx = _index_of(history, path)
        updated = [RepositoryEntry(path=path)]
        updated.extend(e for i, e in enumerate(history) if i != idx)

        await self._save(updated)
        self.logger.debug("add_as_most_recent moved_from=%s size=%s", idx, len(updated))
        return updated

    async def remove_recent(self, path: str) -> list[RepositoryEntry]:
        """Drop every entry with `path`. Saves only when something was removed."""
        if path is None:
            raise ValidationError("path must not be None")

        history = await self._load()
        remaining = [e for e in history if e.path != path]
        removed = len(history) - len(remaining)
        if not removed:
            self.logger.debug("remove_recent: not found, save skipped")
            return history

        await self._save(remaining)
        self.logger.debug("remove_recent removed=%s", removed)
        return remaining

    async def save_recent_history(self, repositories: Sequence[RepositoryEntry]) -> None:
        """Persist the first N entries of `repositories` (N = current size limit), always."""
        if repositories is None:
            raise ValidationError("repositories must not be None")

        trimmed = _trim(repositories, self._max_history_size())
        await self._save(trimmed)
        self.logger.debug("save_recent_history given=%s saved=%s", len(repositories), len(trimmed))
