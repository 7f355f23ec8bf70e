"""
Persistence port for the stores.

A backend holds one opaque byte payload per collection key and knows
nothing about entities; encoding lives in :mod:`.codec`, load/save policy
in :mod:`.repository`.
"""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Key -> bytes store injected into every repository."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def write(self, key: str, data: bytes) -> None:
        """Replace whatever is stored under *key* with *data*."""

    @abstractmethod
    def read(self, key: str) -> bytes:
        """Return the payload under *key*, or raise StorageKeyError."""

    @abstractmethod
    def exists(self, key: str) -> bool: ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove *key*. False if there was nothing to remove."""


class StorageError(Exception):
    """A backend could not complete a read or write."""


class StorageKeyError(StorageError, KeyError):
    """Nothing is stored under the requested key."""


class StoragePermissionError(StorageError):
    """The key is unsafe or the filesystem refused access."""
