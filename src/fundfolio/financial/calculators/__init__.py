"""Financial calculators: EMI amortization, currency conversion, budget periods."""

from .currency import DEFAULT_EXCHANGE_RATES, CurrencyConverter, parse_rate_key
from .emi import AmortizationRow, amortization_schedule, calculate_emi, monthly_rate
from .periods import is_in_current_period

__all__ = [
    "DEFAULT_EXCHANGE_RATES",
    "AmortizationRow",
    "CurrencyConverter",
    "amortization_schedule",
    "calculate_emi",
    "is_in_current_period",
    "monthly_rate",
    "parse_rate_key",
]
