from __future__ import annotations

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class RepositoryRow(Base):
    __tablename__ = "repository_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(128), nullable=False)
    # 0 = most recently used
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    path: Mapped[str] = mapped_column(String(4096), nullable=False)
    category: Mapped[str | None] = mapped_column(String(256), nullable=True)

    __table_args__ = (Index("ix_repository_history_key_position", "key", "position"),)
