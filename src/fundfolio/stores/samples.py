"""First-run sample data.

Only used to give a fresh install something to show; nothing depends on
these records existing.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from fundfolio.financial.enums import BudgetPeriod, Currency, ReminderType, TransactionCategory
from fundfolio.financial.models import Account, Budget, Loan, Reminder, Transaction


def sample_accounts() -> list[Account]:
    return [
        Account(bank_name="SBI", currency=Currency.INR, balance=100_000.00),
        Account(bank_name="HDFC", currency=Currency.INR, balance=200_000.00),
        Account(bank_name="Standard Chartered", currency=Currency.INR, balance=20_000.00),
        Account(bank_name="Commonwealth Bank", currency=Currency.AUD, balance=4_000.00),
        Account(bank_name="Westpac Bank", currency=Currency.AUD, balance=640.00),
    ]


def sample_loans() -> list[Loan]:
    return [
        Loan(
            bank_name="ICICI Bank",
            currency=Currency.INR,
            loan_amount=4_000_000,
            interest_rate=9.5,
            tenure_months=60,
            emi_paid_count=12,
        )
    ]


def sample_transactions(now: datetime | None = None) -> list[Transaction]:
    now = now or datetime.now()
    return [
        Transaction(50.0, Currency.AUD, TransactionCategory.FOOD, "Grocery shopping", date=now),
        Transaction(25.0, Currency.AUD, TransactionCategory.TRANSPORT, "Bus fare", date=now),
        Transaction(2000.0, Currency.AUD, TransactionCategory.INCOME, "Part-time job", date=now),
        Transaction(800.0, Currency.AUD, TransactionCategory.ACCOMMODATION, "Rent", date=now),
    ]


def sample_budgets(now: datetime | None = None) -> list[Budget]:
    now = now or datetime.now()
    return [
        Budget(TransactionCategory.FOOD, 200.0, Currency.AUD, BudgetPeriod.WEEKLY, due_date=now),
        Budget(TransactionCategory.TRANSPORT, 100.0, Currency.AUD, BudgetPeriod.WEEKLY, due_date=now),
    ]


def sample_reminders(now: datetime | None = None) -> list[Reminder]:
    now = now or datetime.now()
    return [
        Reminder("Monthly Rent", now + timedelta(days=5), ReminderType.RENT, amount=800.0),
        Reminder("Tuition Fee", now + timedelta(days=15), ReminderType.TUITION, amount=5000.0),
    ]
