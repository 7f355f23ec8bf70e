"""
Storage backends and collection persistence for fundfolio.

Stores receive a :class:`StorageBackend` (the persistence port) at
construction; :class:`LocalStorage` writes JSON files, :class:`MemoryStorage`
keeps everything in process.
"""

from .base import StorageBackend, StorageError, StorageKeyError, StoragePermissionError
from .local import LocalStorage
from .memory import MemoryStorage
from .repository import (
    ACCOUNTS_KEY,
    BUDGETS_KEY,
    LOANS_KEY,
    REMINDERS_KEY,
    TRANSACTIONS_KEY,
    CollectionRepository,
    account_repository,
    budget_repository,
    loan_repository,
    reminder_repository,
    transaction_repository,
)

__all__ = [
    "ACCOUNTS_KEY",
    "BUDGETS_KEY",
    "LOANS_KEY",
    "REMINDERS_KEY",
    "TRANSACTIONS_KEY",
    "CollectionRepository",
    "LocalStorage",
    "MemoryStorage",
    "StorageBackend",
    "StorageError",
    "StorageKeyError",
    "StoragePermissionError",
    "account_repository",
    "budget_repository",
    "loan_repository",
    "reminder_repository",
    "transaction_repository",
]
