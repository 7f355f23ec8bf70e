"""Data manager: transactions, budgets, and reminders.

Owns three independent collections and the analytics computed over them.
Amounts from different currencies are normalised through a
:class:`CurrencyConverter` before they are summed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from loguru import logger

from fundfolio.core.dispatch import Dispatcher, MainQueue
from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.calculators.periods import is_in_current_period
from fundfolio.financial.enums import BudgetPeriod, Currency, TransactionCategory
from fundfolio.financial.models import Budget, Reminder, Transaction
from fundfolio.storage.repository import CollectionRepository

from .samples import sample_budgets, sample_reminders, sample_transactions

UPCOMING_REMINDER_LIMIT = 3
RECENT_TRANSACTION_LIMIT = 5


def _record_id(record: Transaction | Budget | Reminder | str) -> str:
    return record if isinstance(record, str) else record.id


class DataManager:
    """Aggregate owner of transactions, budgets, and reminders.

    Args:
        transactions: Persistence for the transaction collection.
        budgets: Persistence for the budget collection.
        reminders: Persistence for the reminder collection.
        converter: Converter used by every cross-currency sum.
        dispatcher: Main-context dispatcher that applies ``add_reminder``.
            Defaults to a :class:`MainQueue` exposed as ``self.dispatcher``.
        clock: Returns "now"; period and due-soon checks use it.
        seed_samples: Load sample data when no transactions are saved yet.
    """

    def __init__(
        self,
        transactions: CollectionRepository[Transaction],
        budgets: CollectionRepository[Budget],
        reminders: CollectionRepository[Reminder],
        converter: CurrencyConverter | None = None,
        dispatcher: Dispatcher | None = None,
        clock: Callable[[], datetime] = datetime.now,
        seed_samples: bool = True,
    ) -> None:
        self._transactions_repo = transactions
        self._budgets_repo = budgets
        self._reminders_repo = reminders
        self.converter = converter or CurrencyConverter()
        self.dispatcher = dispatcher or MainQueue()
        self._clock = clock

        self._transactions: list[Transaction] = transactions.load()
        self._budgets: list[Budget] = budgets.load()
        self._reminders: list[Reminder] = reminders.load()

        if not self._transactions and seed_samples:
            self._load_sample_data()

    def _load_sample_data(self) -> None:
        now = self._clock()
        logger.info("No saved transactions, loading sample data")
        self._transactions = sample_transactions(now)
        self._save_transactions()
        if not self._budgets:
            self._budgets = sample_budgets(now)
            self._save_budgets()
        if not self._reminders:
            self._reminders = sample_reminders(now)
            self._save_reminders()

    def _save_transactions(self) -> None:
        self._transactions_repo.save(self._transactions)

    def _save_budgets(self) -> None:
        self._budgets_repo.save(self._budgets)

    def _save_reminders(self) -> None:
        self._reminders_repo.save(self._reminders)

    @staticmethod
    def _index_of(records: list, record_id: str) -> int | None:
        for i, record in enumerate(records):
            if record.id == record_id:
                return i
        return None

    # -- Snapshots ----------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def budgets(self) -> tuple[Budget, ...]:
        return tuple(self._budgets)

    @property
    def reminders(self) -> tuple[Reminder, ...]:
        return tuple(self._reminders)

    # -- Transactions -------------------------------------------------------

    def add_transaction(self, amount: float, transaction: Transaction) -> bool:
        """Append *transaction* unless *amount* is not positive.

        *amount* is the caller's guard value and should equal
        ``transaction.amount``. Raises ValueError if the id is already stored.
        """
        if amount <= 0:
            return False
        if self._index_of(self._transactions, transaction.id) is not None:
            raise ValueError(f"Transaction {transaction.id} already exists")
        self._transactions.append(transaction)
        self._save_transactions()
        logger.debug(f"Added {transaction.category} transaction of {transaction.amount} {transaction.currency}")
        return True

    def delete_transaction(self, transaction: Transaction | str) -> None:
        index = self._index_of(self._transactions, _record_id(transaction))
        if index is None:
            return
        del self._transactions[index]
        self._save_transactions()

    def update_transaction(self, transaction: Transaction) -> None:
        """Replace the stored transaction with the same id. Unknown ids are ignored."""
        index = self._index_of(self._transactions, transaction.id)
        if index is None:
            return
        self._transactions[index] = transaction
        self._save_transactions()

    def recent_transactions(self, limit: int = RECENT_TRANSACTION_LIMIT) -> list[Transaction]:
        """Newest first."""
        return sorted(self._transactions, key=lambda t: t.date, reverse=True)[:limit]

    def transactions_for_account(self, account_id: str) -> list[Transaction]:
        """Transactions recorded against one account, newest first."""
        matching = [t for t in self._transactions if t.account_id == account_id]
        return sorted(matching, key=lambda t: t.date, reverse=True)

    # -- Budgets ------------------------------------------------------------

    def add_budget(self, budget: Budget) -> None:
        if self._index_of(self._budgets, budget.id) is not None:
            raise ValueError(f"Budget {budget.id} already exists")
        self._budgets.append(budget)
        self._save_budgets()

    def delete_budget(self, budget: Budget | str) -> None:
        index = self._index_of(self._budgets, _record_id(budget))
        if index is None:
            return
        del self._budgets[index]
        self._save_budgets()

    def update_budget(self, budget: Budget) -> None:
        index = self._index_of(self._budgets, budget.id)
        if index is None:
            return
        self._budgets[index] = budget
        self._save_budgets()

    def find_budget(self, category: TransactionCategory) -> Budget | None:
        """First budget filed under *category*, in insertion order."""
        return next((b for b in self._budgets if b.category == category), None)

    def record_budget_spend(self, budget_id: str, amount: float) -> Budget | None:
        """Add *amount* (already in the budget's currency) to its running total."""
        index = self._index_of(self._budgets, budget_id)
        if index is None:
            return None
        current = self._budgets[index]
        updated = replace(current, spent=current.spent + amount)
        self._budgets[index] = updated
        self._save_budgets()
        if updated.is_over_budget and not current.is_over_budget:
            logger.info(f"{updated.period} {updated.category} budget exceeded: {updated.spent} > {updated.limit}")
        return updated

    def get_spent_amount(self, category: TransactionCategory, period: BudgetPeriod, currency: Currency) -> float:
        """Spending in *category* during the current *period*, in *currency*.

        Computed fresh from transaction history; income is never counted.
        This does not read or update ``Budget.spent``.
        """
        now = self._clock()
        return sum(
            self.converter.convert(t.amount, t.currency, currency)
            for t in self._transactions
            if t.category == category and not t.is_income and is_in_current_period(t.date, period, now)
        )

    # -- Reminders ----------------------------------------------------------

    def add_reminder(self, reminder: Reminder) -> None:
        """Queue *reminder* for the main context.

        The reminder is not visible in :attr:`reminders` until the
        dispatcher runs the queued callback.
        """
        self.dispatcher.dispatch(lambda: self._append_reminder(reminder))

    def _append_reminder(self, reminder: Reminder) -> None:
        if self._index_of(self._reminders, reminder.id) is not None:
            logger.warning(f"Reminder {reminder.id} already exists, not added again")
            return
        self._reminders.append(reminder)
        self._save_reminders()
        logger.debug(f"Added reminder {reminder.title!r} due {reminder.due_date:%Y-%m-%d}")

    def delete_reminder(self, reminder: Reminder | str) -> None:
        index = self._index_of(self._reminders, _record_id(reminder))
        if index is None:
            return
        del self._reminders[index]
        self._save_reminders()

    def toggle_reminder_completion(self, reminder: Reminder | str) -> Reminder | None:
        index = self._index_of(self._reminders, _record_id(reminder))
        if index is None:
            return None
        current = self._reminders[index]
        updated = replace(current, is_completed=not current.is_completed)
        self._reminders[index] = updated
        self._save_reminders()
        return updated

    def get_upcoming_reminders(self, limit: int = UPCOMING_REMINDER_LIMIT) -> list[Reminder]:
        """Incomplete reminders due within the next week, soonest first."""
        now = self._clock()
        due = [r for r in self._reminders if r.due_soon_at(now)]
        return sorted(due, key=lambda r: r.due_date)[:limit]

    def get_overdue_reminders(self) -> list[Reminder]:
        now = self._clock()
        return sorted((r for r in self._reminders if r.overdue_at(now)), key=lambda r: r.due_date)

    # -- Analytics ----------------------------------------------------------

    def get_income_amount(self, currency: Currency) -> float:
        """Lifetime income, converted to *currency*."""
        return sum(self.converter.convert(t.amount, t.currency, currency) for t in self._transactions if t.is_income)

    def get_expense_amount(self, currency: Currency) -> float:
        """Lifetime spending, converted to *currency*."""
        return sum(
            self.converter.convert(t.amount, t.currency, currency) for t in self._transactions if not t.is_income
        )

    def get_total_balance(self, currency: Currency) -> float:
        """Lifetime income minus lifetime spending, in *currency*."""
        return self.get_income_amount(currency) - self.get_expense_amount(currency)
