"""Where repohistory keeps its SQLite file and finds its Alembic scripts."""

from __future__ import annotations

import os
import platform
from pathlib import Path

APP_NAME = "RepoHistory"
DB_FILENAME = "repositories.db"
DATA_DIR_ENV = "REPOHISTORY_DATA_DIR"
MIGRATIONS_DIR_ENV = "REPOHISTORY_ALEMBIC_DIR"

# shipped inside the package, next to this module
_BUNDLED_MIGRATIONS = Path(__file__).resolve().parent / "migrations"

__all__ = ["APP_NAME", "user_data_dir", "db_path", "alembic_dir"]


def _platform_data_root() -> Path:
    system = platform.system()
    if system == "Windows":
        return Path(os.getenv("APPDATA") or Path.home() / "AppData" / "Roaming")
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")


def user_data_dir() -> Path:
    """
    Per-user data directory, created on first use.

    REPOHISTORY_DATA_DIR wins over the platform default
    (%APPDATA%, ~/Library/Application Support, $XDG_DATA_HOME or ~/.local/share).
    """
    override = os.getenv(DATA_DIR_ENV)
    p = Path(override).expanduser().resolve() if override else _platform_data_root() / APP_NAME
    p.mkdir(parents=True, exist_ok=True)
    return p


def db_path() -> Path:
    return user_data_dir() / DB_FILENAME


def alembic_dir() -> Path:
    """Migrations folder: REPOHISTORY_ALEMBIC_DIR when it exists, else the one bundled with the package."""
    override = os.getenv(MIGRATIONS_DIR_ENV)
    if override:
        p = Path(override).expanduser().resolve()
        if p.is_dir():
            return p
    return _BUNDLED_MIGRATIONS
