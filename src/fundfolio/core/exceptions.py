"""
FundFolio exception hierarchy.

All fundfolio exceptions inherit from FundFolioError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes.
"""


class FundFolioError(Exception):
    """Base exception class for all fundfolio errors."""


class ConfigurationError(FundFolioError):
    """Raised for configuration errors (missing keys, invalid values)."""


class ValidationError(FundFolioError):
    """Raised when a mutation receives input it cannot accept."""


class InvalidAmountError(ValidationError):
    """Raised for zero or negative monetary amounts."""


class InsufficientFundsError(ValidationError):
    """Raised when a withdrawal asks for more than the account holds."""

    def __init__(self, available: float, attempted: float):
        self.available = available
        self.attempted = attempted
        super().__init__(
            f"Insufficient funds. Tried to withdraw {attempted}, but only {available} is available."
        )


class ExchangeRateError(FundFolioError):
    """Raised by a strict converter when no rate exists for a currency pair."""


class AccountNotFoundError(FundFolioError, KeyError):
    """Raised when money movement names an account that doesn't exist."""
