"""Deposits and withdrawals against a bank account.

A withdrawal touches three collections: the account balance, the first
budget filed under the withdrawal's category, and the transaction log.
The balance is debited first, and :meth:`AccountsStore.withdraw` is the
only place the balance is checked. When it refuses, nothing else has
changed yet, so a rejected withdrawal leaves all three exactly as they were.
"""

from __future__ import annotations

from loguru import logger

from fundfolio.core.exceptions import AccountNotFoundError
from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.enums import TransactionCategory
from fundfolio.financial.models import Transaction

from .accounts import AccountsStore, require_valid_amount
from .data_manager import DataManager

DEFAULT_DEPOSIT_DESCRIPTION = "Deposit"
DEFAULT_WITHDRAWAL_DESCRIPTION = "Withdrawal"


class AccountActivity:
    """Money movement on bank accounts, kept consistent with budgets and transactions."""

    def __init__(
        self,
        accounts: AccountsStore,
        data: DataManager,
        converter: CurrencyConverter | None = None,
    ) -> None:
        self.accounts = accounts
        self.data = data
        self.converter = converter or data.converter

    def deposit(self, account_id: str, amount: float, description: str | None = None) -> Transaction:
        """Credit *amount* to the account and log it as income. Budgets are untouched."""
        require_valid_amount(amount, "Deposit")
        account = self.accounts.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)

        self.accounts.deposit(account_id, amount)
        transaction = Transaction(
            amount=amount,
            currency=account.currency,
            category=TransactionCategory.INCOME,
            description=description or DEFAULT_DEPOSIT_DESCRIPTION,
            account_id=account_id,
        )
        self.data.add_transaction(amount, transaction)
        return transaction

    def withdraw(
        self,
        account_id: str,
        amount: float,
        category: TransactionCategory = TransactionCategory.OTHER,
        description: str | None = None,
    ) -> Transaction:
        """Debit *amount*, charge the matching budget, and log the spend.

        Raises:
            InvalidAmountError: if amount is not positive.
            AccountNotFoundError: if the account doesn't exist.
            InsufficientFundsError: if amount exceeds the balance. Nothing changes.
        """
        category = TransactionCategory(category)
        require_valid_amount(amount, "Withdrawal")
        account = self.accounts.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)

        # Raises InsufficientFundsError before any budget or transaction changes
        self.accounts.withdraw(account_id, amount)

        budget = self.data.find_budget(category)
        if budget is not None:
            charged = self.converter.convert(amount, account.currency, budget.currency)
            self.data.record_budget_spend(budget.id, charged)

        transaction = Transaction(
            amount=amount,
            currency=account.currency,
            category=category,
            description=description or DEFAULT_WITHDRAWAL_DESCRIPTION,
            account_id=account_id,
        )
        self.data.add_transaction(amount, transaction)
        logger.debug(f"Withdrew {amount} {account.currency} from {account.bank_name} for {category}")
        return transaction
