"""
Local filesystem storage backend.

Each collection key maps to ``<base_path>/<key>.json``. Keys are
slash-separated names (``userAccounts``, ``alice/userLoans``); anything
that could resolve outside ``base_path`` is refused.
"""

import re
from pathlib import Path

from loguru import logger

from fundfolio.core.utils.file_io import safe_write

from .base import StorageBackend, StorageKeyError, StoragePermissionError

_SEGMENT = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage(StorageBackend):
    """One JSON document per key under a base directory."""

    def __init__(self, base_path: str = "~/.fundfolio-data/storage", suffix: str = ".json", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)
        self.suffix = suffix

    def _get_full_path(self, key: str) -> Path:
        """Map *key* to its file, raising StoragePermissionError for unsafe keys."""
        segments = key.strip().split("/")
        for segment in segments:
            if segment in ("", ".", "..") or not _SEGMENT.match(segment):
                raise StoragePermissionError(f"Unsafe storage key {key!r}")

        path = self.base_path.joinpath(*segments[:-1], segments[-1] + self.suffix).resolve()
        if not path.is_relative_to(self.base_path):
            raise StoragePermissionError(f"Storage key {key!r} resolves outside {self.base_path}")
        return path

    def write(self, key: str, data: bytes) -> None:
        path = self._get_full_path(key)
        try:
            safe_write(str(path), data.decode("utf-8"))
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
        logger.debug(f"Wrote {len(data)} bytes to {path}")

    def read(self, key: str) -> bytes:
        path = self._get_full_path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise StorageKeyError(f"Key not found: {key}") from None
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e

    def exists(self, key: str) -> bool:
        return self._get_full_path(key).is_file()

    def delete(self, key: str) -> bool:
        path = self._get_full_path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
