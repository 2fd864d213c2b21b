"""Storage contracts and implementations for the recent repositories history."""

__all__ = ["InMemoryRepositoryStorage"]

# storage_sql is left out: it needs the migrated SQLite schema
from .storage_memory import InMemoryRepositoryStorage  # noqa: F401
