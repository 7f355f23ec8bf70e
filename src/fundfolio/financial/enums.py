"""Enumerations shared by the entity model.

Each value is the stable string tag used on the wire ("AUD", "Food", ...).
"""

from __future__ import annotations

from enum import StrEnum


class Currency(StrEnum):
    AUD = "AUD"
    INR = "INR"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    @property
    def symbol(self) -> str:
        return _CURRENCY_SYMBOLS[self]

    @property
    def display_name(self) -> str:
        return _CURRENCY_NAMES[self]

    def format(self, amount: float) -> str:
        """Render *amount* for display, e.g. ``A$1,234.50``."""
        sign = "-" if amount < 0 else ""
        return f"{sign}{self.symbol}{abs(amount):,.2f}"


_CURRENCY_SYMBOLS = {
    Currency.AUD: "A$",
    Currency.INR: "₹",
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
}

_CURRENCY_NAMES = {
    Currency.AUD: "Australian Dollar",
    Currency.INR: "Indian Rupee",
    Currency.USD: "US Dollar",
    Currency.EUR: "Euro",
    Currency.GBP: "British Pound",
}


class TransactionCategory(StrEnum):
    FOOD = "Food"
    TRANSPORT = "Transport"
    ACCOMMODATION = "Accommodation"
    EDUCATION = "Education"
    ENTERTAINMENT = "Entertainment"
    INCOME = "Income"
    OTHER = "Other"

    @classmethod
    def spending(cls) -> list[TransactionCategory]:
        """Categories a budget or withdrawal can be filed under."""
        return [c for c in cls if c is not cls.INCOME]


class BudgetPeriod(StrEnum):
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class ReminderType(StrEnum):
    RENT = "Rent"
    TUITION = "Tuition"
    EMI = "EMI"
    BILL = "Bill"
    OTHER = "Other"
