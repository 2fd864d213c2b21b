"""Runtime settings for the recent repositories history."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from repohistory.db.repo.errors import ValidationError

DEFAULT_HISTORY_SIZE = 30
HISTORY_SIZE_ENV = "REPOHISTORY_HISTORY_SIZE"
DEBUG_ENV = "REPOHISTORY_DEBUG"


@dataclass(slots=True)
class AppSettings:
    """Mutable on purpose: hosts change the size at runtime and the manager reads it on every call."""

    recent_repositories_history_size: int = DEFAULT_HISTORY_SIZE
    debug: bool = False

    @classmethod
    def from_env(cls) -> AppSettings:
        raw = os.getenv(HISTORY_SIZE_ENV)
        size = DEFAULT_HISTORY_SIZE
        if raw is not None and raw.strip():
            try:
                size = int(raw)
            except ValueError as e:
                raise ValidationError(f"{HISTORY_SIZE_ENV} must be an integer, got {raw!r}") from e
        return cls(recent_repositories_history_size=size, debug=os.getenv(DEBUG_ENV) == "1")


# process-wide default, used when no accessor is injected
app_settings = AppSettings()


def history_size_accessor(settings: AppSettings | None = None) -> Callable[[], int]:
    """Return a zero-arg callable reading the live history size from `settings`."""
    target = settings or app_settings
    return lambda: target.recent_repositories_history_size
