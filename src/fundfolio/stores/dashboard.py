"""Read-only dashboard aggregates across accounts, loans, and transactions."""

from __future__ import annotations

from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.enums import Currency
from fundfolio.financial.models import Reminder, Transaction

from .accounts import AccountsStore
from .data_manager import DataManager
from .loans import LoanStore


class Dashboard:
    """Totals for a chosen display currency. Never mutates anything."""

    def __init__(
        self,
        accounts: AccountsStore,
        data: DataManager,
        loans: LoanStore | None = None,
        converter: CurrencyConverter | None = None,
        currency: Currency = Currency.AUD,
    ) -> None:
        self.accounts = accounts
        self.data = data
        self.loans = loans
        self.converter = converter or data.converter
        self.currency = Currency(currency)

    def total_account_balance(self, currency: Currency | None = None) -> float:
        return self.accounts.total_balance(currency or self.currency, self.converter)

    def total_balance(self, currency: Currency | None = None) -> float:
        """Account balances plus the lifetime transaction net."""
        currency = currency or self.currency
        return self.total_account_balance(currency) + self.data.get_total_balance(currency)

    def total_income(self, currency: Currency | None = None) -> float:
        return self.data.get_income_amount(currency or self.currency)

    def total_expenses(self, currency: Currency | None = None) -> float:
        return self.data.get_expense_amount(currency or self.currency)

    def total_loan_outstanding(self, currency: Currency | None = None) -> float:
        if self.loans is None:
            return 0.0
        return self.loans.total_outstanding(currency or self.currency, self.converter)

    def upcoming_reminders(self) -> list[Reminder]:
        return self.data.get_upcoming_reminders()

    def recent_transactions(self) -> list[Transaction]:
        return self.data.recent_transactions()
