"""Typed exceptions for the repository history (no logic)."""


class ValidationError(Exception):
    """Client error: bad input parameters (e.g., None instead of a history or a path)."""


class StorageError(Exception):
    """Persistent storage failure (DB/file I/O)."""
