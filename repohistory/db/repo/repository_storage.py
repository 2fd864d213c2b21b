"""Abstract interface for recent repositories storage (no implementation here)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .schemas import RepositoryEntry


class RepositoryStorage(ABC):
    """
    Contract for keyed persistence of repository entries.

    Implementations must:
      - keep the order of entries exactly as saved (index 0 = most recent),
      - return None or an empty list (never raise) for a key that was never saved,
      - replace the whole collection on save (overwrite, not append).
    """

    @abstractmethod
    def load(self, key: str) -> list[RepositoryEntry] | None:
        """Return the entries stored under `key`, or None/[] when nothing is stored."""
        raise NotImplementedError

    @abstractmethod
    def save(self, key: str, entries: Sequence[RepositoryEntry]) -> None:
        """
        Replace the collection under `key` with `entries`.
        May raise ValidationError or StorageError.
        """
        raise NotImplementedError
