"""Lazily created SQLite engine and the session scope used by the SQL storage."""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session

from .paths import db_path

__all__ = ["get_engine", "get_session"]


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Engine on <user_data_dir>/repositories.db; built on first use so importing touches no disk."""
    # storage calls arrive from asyncio worker threads
    return create_engine(f"sqlite:///{db_path().as_posix()}", connect_args={"check_same_thread": False})


@contextmanager
def get_session():
    """One unit of work: commit when the block exits cleanly, rollback otherwise."""
    session = Session(get_engine(), autoflush=False, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
