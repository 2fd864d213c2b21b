"""Data contracts (DTO) for the recent repositories history. No business logic here."""

from __future__ import annotations

from dataclasses import dataclass

# The only collection the history manager reads and writes
HISTORY_KEY: str = "history"


@dataclass(slots=True)
class RepositoryEntry:
    """
    Single recent repository entry.

    Note: 'path' is compared as an exact string (no case folding, no separator cleanup);
    'category' is a free-form label and never affects ordering or dedup.
    """

    path: str
    category: str | None = None
