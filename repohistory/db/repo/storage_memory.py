"""Dict-backed RepositoryStorage for hosts without a database."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from repohistory.db.repo.errors import ValidationError
from repohistory.db.repo.repository_storage import RepositoryStorage
from repohistory.db.repo.schemas import RepositoryEntry


def _check_key(key: str) -> None:
    if not key:
        raise ValidationError("key is required")


class InMemoryRepositoryStorage(RepositoryStorage):
    """Keeps copies of saved entries, so callers can't mutate the stored state."""

    def __init__(self, initial: dict[str, Sequence[RepositoryEntry]] | None = None):
        self._data: dict[str, list[RepositoryEntry]] = {}
        for key, entries in (initial or {}).items():
            self.save(key, entries)

    def load(self, key: str) -> list[RepositoryEntry] | None:
        _check_key(key)
        stored = self._data.get(key)
        if stored is None:
            return None
        return [replace(e) for e in stored]

    def save(self, key: str, entries: Sequence[RepositoryEntry]) -> None:
        _check_key(key)
        self._data[key] = [replace(e) for e in entries]

    def keys(self) -> list[str]:
        return sorted(self._data)
