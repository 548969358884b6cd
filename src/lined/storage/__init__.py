"""Persistence collaborators."""

from .files import LineFile, StorageError

__all__ = ["LineFile", "StorageError"]
