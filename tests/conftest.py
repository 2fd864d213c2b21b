from contextlib import contextmanager

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from repohistory.db.models import Base
from repohistory.db.repo import storage_sql
from repohistory.db.repo.repository_storage import RepositoryStorage
from repohistory.db.repo.schemas import RepositoryEntry


class RecordingStorage(RepositoryStorage):
    """Fake storage: returns a fixed history and records every call."""

    def __init__(self, history=None, *, load_error=None, save_error=None):
        self.history = history
        self.load_error = load_error
        self.save_error = save_error
        self.load_calls: list[str] = []
        self.save_calls: list[tuple[str, list[RepositoryEntry]]] = []

    def load(self, key):
        self.load_calls.append(key)
        if self.load_error:
            raise self.load_error
        return self.history

    def save(self, key, entries):
        # snapshot, so later mutation by the caller doesn't change what we saw
        self.save_calls.append((key, list(entries)))
        if self.save_error:
            raise self.save_error


@pytest.fixture
def recording_storage_factory():
    # constructor, so each test sets its own history
    def _factory(history=None, **kwargs):
        return RecordingStorage(history, **kwargs)

    return _factory


@pytest.fixture
def history_size():
    """Mutable limit; tests change it via history_size['value']."""
    return {"value": 30}


@pytest.fixture(scope="function")
def db_session():
    """Fresh in-memory SQLite DB for each test."""
    engine = create_engine("sqlite:///:memory:", echo=False, future=True)
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(autouse=True)
def patch_get_session(monkeypatch, db_session):

    @contextmanager
    def fake_get_session():
        try:
            yield db_session
        except Exception:
            db_session.rollback()
            raise

    monkeypatch.setattr(storage_sql, "get_session", fake_get_session)
