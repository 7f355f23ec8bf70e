"""FundFolio: personal finance tracking: accounts, loans, budgets, reminders."""

__version__ = "0.1.0"
