"""Best-effort persistence of one entity collection.

A repository pairs a storage key with an entity codec. Loading never
raises: a missing key or any decode failure yields an empty list, and
the caller seeds sample data if it wants to. Saving never raises either;
failures are logged and the write is skipped.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from loguru import logger

from fundfolio.financial.models import Account, Budget, Loan, Reminder, Transaction

from . import codec
from .base import StorageBackend, StorageError, StorageKeyError

T = TypeVar("T")

ACCOUNTS_KEY = "userAccounts"
LOANS_KEY = "userLoans"
TRANSACTIONS_KEY = "userTransactions"
BUDGETS_KEY = "userGoals"
REMINDERS_KEY = "userReminders"


class CollectionRepository(Generic[T]):
    """Load/save contract for a single collection.

    Args:
        backend: Storage port the payload is written to.
        key: Collection key within the backend.
        encode: Entity -> JSON-compatible dict.
        decode: JSON-compatible dict -> entity.
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: str,
        encode: Callable[[T], dict[str, Any]],
        decode: Callable[[dict[str, Any]], T],
    ):
        self.backend = backend
        self.key = key
        self._encode = encode
        self._decode = decode

    def load(self) -> list[T]:
        try:
            raw = self.backend.read(self.key)
        except StorageKeyError:
            return []
        except (StorageError, OSError) as e:
            logger.warning(f"Could not read collection '{self.key}': {e}")
            return []

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
            return [self._decode(item) for item in payload]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding unreadable collection '{self.key}': {e}")
            return []

    def save(self, items: Iterable[T]) -> None:
        try:
            payload = json.dumps([self._encode(item) for item in items], ensure_ascii=False)
        except (ValueError, TypeError) as e:
            logger.warning(f"Could not encode collection '{self.key}', skipping write: {e}")
            return

        try:
            self.backend.write(self.key, payload.encode("utf-8"))
        except (StorageError, OSError) as e:
            logger.warning(f"Could not write collection '{self.key}', skipping: {e}")


def account_repository(backend: StorageBackend) -> CollectionRepository[Account]:
    return CollectionRepository(backend, ACCOUNTS_KEY, codec.encode_account, codec.decode_account)


def loan_repository(backend: StorageBackend) -> CollectionRepository[Loan]:
    return CollectionRepository(backend, LOANS_KEY, codec.encode_loan, codec.decode_loan)


def transaction_repository(backend: StorageBackend) -> CollectionRepository[Transaction]:
    return CollectionRepository(backend, TRANSACTIONS_KEY, codec.encode_transaction, codec.decode_transaction)


def budget_repository(backend: StorageBackend) -> CollectionRepository[Budget]:
    return CollectionRepository(backend, BUDGETS_KEY, codec.encode_budget, codec.decode_budget)


def reminder_repository(backend: StorageBackend) -> CollectionRepository[Reminder]:
    return CollectionRepository(backend, REMINDERS_KEY, codec.encode_reminder, codec.decode_reminder)
