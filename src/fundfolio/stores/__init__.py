"""Stores: the only place entity state changes, plus read-only aggregates."""

from .accounts import AccountsStore
from .activity import AccountActivity
from .dashboard import Dashboard
from .data_manager import DataManager
from .loans import LoanStore

__all__ = [
    "AccountActivity",
    "AccountsStore",
    "Dashboard",
    "DataManager",
    "LoanStore",
]
