from .db.repo.errors import StorageError, ValidationError
from .db.repo.repository_storage import RepositoryStorage
from .db.repo.schemas import HISTORY_KEY, RepositoryEntry
from .db.repo.storage_memory import InMemoryRepositoryStorage
from .history_manager import RepositoryHistoryManager
from .logging_utils import setup_logging
from .settings import DEFAULT_HISTORY_SIZE, AppSettings, history_size_accessor

__all__ = [
    "HISTORY_KEY",
    "DEFAULT_HISTORY_SIZE",
    "RepositoryEntry",
    "RepositoryStorage",
    "InMemoryRepositoryStorage",
    "RepositoryHistoryManager",
    "AppSettings",
    "history_size_accessor",
    "StorageError",
    "ValidationError",
    "setup_logging",
]
__version__ = "0.1.0"
