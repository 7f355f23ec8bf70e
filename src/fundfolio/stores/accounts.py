"""Accounts store: owns the bank account collection.

Every command that changes an account (add, remove, deposit,
withdraw) writes the whole collection back through the repository.
"""

from __future__ import annotations

import math
from dataclasses import replace

from loguru import logger

from fundfolio.core.exceptions import InsufficientFundsError, InvalidAmountError
from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.enums import Currency
from fundfolio.financial.models import Account
from fundfolio.storage.repository import CollectionRepository

from .samples import sample_accounts


def require_valid_amount(amount: float, action: str) -> None:
    """Raise InvalidAmountError unless *amount* is a finite positive number."""
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(f"{action} amount must be a positive number, got {amount}")


class AccountsStore:
    """Ordered collection of bank accounts, unique by ``account_id``."""

    def __init__(self, repository: CollectionRepository[Account], seed_samples: bool = True) -> None:
        self._repository = repository
        self._accounts: list[Account] = repository.load()
        if not self._accounts and seed_samples:
            logger.info("No saved accounts, loading sample accounts")
            self._accounts = sample_accounts()
            self._save()

    def _save(self) -> None:
        self._repository.save(self._accounts)

    def _index_of(self, account_id: str) -> int | None:
        for i, account in enumerate(self._accounts):
            if account.account_id == account_id:
                return i
        return None

    def _replace(self, index: int, account: Account) -> Account:
        self._accounts[index] = account
        self._save()
        return account

    # -- Queries ------------------------------------------------------------

    @property
    def accounts(self) -> tuple[Account, ...]:
        return tuple(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def get_by_id(self, account_id: str) -> Account | None:
        """Get an account by ID. Returns None if not found."""
        index = self._index_of(account_id)
        return None if index is None else self._accounts[index]

    def total_balance(self, currency: Currency, converter: CurrencyConverter) -> float:
        """Sum of all balances converted to *currency*."""
        return sum(converter.convert(a.balance, a.currency, currency) for a in self._accounts)

    # -- Commands -----------------------------------------------------------

    def add(self, account: Account) -> None:
        if self._index_of(account.account_id) is not None:
            raise ValueError(f"Account {account.account_id} already exists")
        self._accounts.append(account)
        self._save()
        logger.debug(f"Added account {account.bank_name} ({account.account_id})")

    def remove(self, account: Account | str) -> None:
        """Remove by id. Unknown ids are ignored."""
        account_id = account if isinstance(account, str) else account.account_id
        index = self._index_of(account_id)
        if index is None:
            return
        del self._accounts[index]
        self._save()
        logger.debug(f"Removed account {account_id}")

    def deposit(self, account_id: str, amount: float) -> Account | None:
        """Increase a balance. Returns the updated account, or None if unknown."""
        require_valid_amount(amount, "Deposit")
        index = self._index_of(account_id)
        if index is None:
            return None
        current = self._accounts[index]
        return self._replace(index, replace(current, balance=current.balance + amount))

    def withdraw(self, account_id: str, amount: float) -> Account | None:
        """Decrease a balance, refusing to go below zero.

        Raises:
            InvalidAmountError: if amount is not positive.
            InsufficientFundsError: if amount exceeds the balance. Nothing changes.
        """
        require_valid_amount(amount, "Withdrawal")
        index = self._index_of(account_id)
        if index is None:
            return None
        current = self._accounts[index]
        if amount > current.balance:
            raise InsufficientFundsError(available=current.balance, attempted=amount)
        return self._replace(index, replace(current, balance=current.balance - amount))

