"""Financial domain: entity model, enumerations, and calculators."""

from .calculators import CurrencyConverter, calculate_emi
from .enums import BudgetPeriod, Currency, ReminderType, TransactionCategory
from .models import Account, Budget, Loan, Reminder, Transaction

__all__ = [
    "Account",
    "Budget",
    "BudgetPeriod",
    "Currency",
    "CurrencyConverter",
    "Loan",
    "Reminder",
    "ReminderType",
    "Transaction",
    "TransactionCategory",
    "calculate_emi",
]
