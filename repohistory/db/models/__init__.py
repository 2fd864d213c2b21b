"""ORM models for repohistory."""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


# export models
from .repository import RepositoryRow  # noqa: E402,F401
