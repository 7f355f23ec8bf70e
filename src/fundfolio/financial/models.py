"""Core financial data models.

Plain value records for bank accounts, loans, transactions, budgets, and
reminders. Records are frozen: stores change state by replacing a record
with an updated copy (``dataclasses.replace``), never by mutating it.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from .calculators.emi import AmortizationRow, amortization_schedule, calculate_emi
from .enums import BudgetPeriod, Currency, ReminderType, TransactionCategory

DUE_SOON_WINDOW = timedelta(days=7)


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid.uuid4())


def _coerce(record: object, name: str, enum_cls: type) -> None:
    value = getattr(record, name)
    if not isinstance(value, enum_cls):
        object.__setattr__(record, name, enum_cls(value))


@dataclass(frozen=True)
class Account:
    """Bank account.

    Attributes:
        bank_name: Institution name (immutable).
        currency: Currency the balance is held in.
        balance: Current balance.
        account_id: Unique identifier.
    """

    bank_name: str
    currency: Currency
    balance: float
    account_id: str = field(default_factory=new_id)

    def __post_init__(self):
        _coerce(self, "currency", Currency)
        if not self.bank_name:
            raise ValueError("Bank name cannot be empty")


@dataclass(frozen=True)
class Loan:
    """Loan repaid in equated monthly installments.

    The optional ``linked_account_id`` names the bank account EMIs are
    debited from. It is a lookup reference only; deleting the loan never
    touches that account.

    Attributes:
        bank_name: Lender name.
        currency: Currency of the loan.
        loan_amount: Original principal.
        interest_rate: Annual rate as a percentage (9.5 means 9.5%).
        tenure_months: Number of installments.
        emi_paid_count: Installments paid so far.
        linked_account_id: Payment source account, if any.
        loan_id: Unique identifier.
    """

    bank_name: str
    currency: Currency
    loan_amount: float
    interest_rate: float
    tenure_months: int
    emi_paid_count: int = 0
    linked_account_id: str | None = None
    loan_id: str = field(default_factory=new_id)

    def __post_init__(self):
        _coerce(self, "currency", Currency)
        if not self.bank_name:
            raise ValueError("Bank name cannot be empty")
        if self.loan_amount <= 0:
            raise ValueError(f"Loan {self.bank_name} needs a positive principal: {self.loan_amount}")
        if self.interest_rate < 0:
            raise ValueError(f"Loan {self.bank_name} has negative interest rate: {self.interest_rate}")
        if self.tenure_months <= 0:
            raise ValueError(f"Loan {self.bank_name} needs a tenure of at least one month")
        if self.emi_paid_count < 0:
            raise ValueError(f"Loan {self.bank_name} has negative EMI count: {self.emi_paid_count}")

    @property
    def emi_amount(self) -> float:
        """Fixed monthly installment."""
        return calculate_emi(self.loan_amount, self.interest_rate, self.tenure_months)

    @property
    def emi_left(self) -> int:
        return max(0, self.tenure_months - self.emi_paid_count)

    @property
    def paid_amount(self) -> float:
        return self.emi_paid_count * self.emi_amount

    @property
    def total_payable(self) -> float:
        """Principal plus all interest over the full tenure."""
        return self.emi_amount * self.tenure_months

    @property
    def total_interest(self) -> float:
        return self.total_payable - self.loan_amount

    @property
    def outstanding(self) -> float:
        return max(0.0, self.total_payable - self.paid_amount)

    def schedule(self) -> list[AmortizationRow]:
        """Month-by-month split of each installment into interest and principal."""
        return amortization_schedule(self.loan_amount, self.interest_rate, self.tenure_months)


@dataclass(frozen=True)
class Transaction:
    """A single income or spending event."""

    amount: float
    currency: Currency
    category: TransactionCategory
    description: str = ""
    date: datetime = field(default_factory=datetime.now)
    account_id: str | None = None
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        _coerce(self, "currency", Currency)
        _coerce(self, "category", TransactionCategory)
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise ValueError(f"Transaction amount must be positive, got {self.amount}")

    @property
    def is_income(self) -> bool:
        return self.category == TransactionCategory.INCOME


@dataclass(frozen=True)
class Budget:
    """Spending limit for one category over a recurring period.

    ``spent`` is a running total fed by withdrawals filed under the same
    category. It is not reset when the period rolls over.
    """

    category: TransactionCategory
    limit: float
    currency: Currency
    period: BudgetPeriod
    due_date: datetime | None = None
    spent: float = 0.0
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        _coerce(self, "category", TransactionCategory)
        _coerce(self, "currency", Currency)
        _coerce(self, "period", BudgetPeriod)
        if self.limit <= 0:
            raise ValueError(f"Budget limit must be positive, got {self.limit}")
        if self.spent < 0:
            raise ValueError(f"Budget spent cannot be negative, got {self.spent}")

    @property
    def remaining_amount(self) -> float:
        return max(0.0, self.limit - self.spent)

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.limit

    @property
    def progress(self) -> float:
        """Fraction of the limit used so far (may exceed 1.0)."""
        return self.spent / self.limit


@dataclass(frozen=True)
class Reminder:
    """Payment reminder (rent, tuition, EMI, bills)."""

    title: str
    due_date: datetime
    reminder_type: ReminderType
    amount: float | None = None
    is_completed: bool = False
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        _coerce(self, "reminder_type", ReminderType)
        if not self.title:
            raise ValueError("Reminder title cannot be empty")

    def overdue_at(self, now: datetime) -> bool:
        return not self.is_completed and self.due_date < now

    def due_soon_at(self, now: datetime) -> bool:
        # No lower bound: an overdue reminder is still due soon.
        return not self.is_completed and self.due_date <= now + DUE_SOON_WINDOW

    @property
    def is_overdue(self) -> bool:
        return self.overdue_at(datetime.now())

    @property
    def is_due_soon(self) -> bool:
        return self.due_soon_at(datetime.now())
