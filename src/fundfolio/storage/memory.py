"""In-process storage backend, for tests and throwaway sessions."""

from .base import StorageBackend, StorageKeyError


class MemoryStorage(StorageBackend):
    """Dict-backed storage. Nothing touches the filesystem."""

    def __init__(self, **config):
        super().__init__(**config)
        self._data: dict[str, bytes] = {}
        self.writes = 0

    def write(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)
        self.writes += 1

    def read(self, key: str) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise StorageKeyError(f"Key not found: {key}") from None

    def exists(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
