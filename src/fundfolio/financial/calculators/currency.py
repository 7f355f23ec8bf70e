"""Static-table currency conversion.

The table is directed: ``("AUD", "INR")`` and ``("INR", "AUD")`` are
separate entries and are not derived from each other. Pairs missing from
the table fall back to ``fallback_rate`` (1.0 unless configured), or raise
:class:`ExchangeRateError` when the converter is strict.
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from fundfolio.core.exceptions import ExchangeRateError

from ..enums import Currency

RateTable = Mapping[tuple[Currency, Currency], float]

DEFAULT_EXCHANGE_RATES: dict[tuple[Currency, Currency], float] = {
    (Currency.AUD, Currency.INR): 55.0,
    (Currency.INR, Currency.AUD): 0.018,
    (Currency.AUD, Currency.USD): 0.67,
    (Currency.USD, Currency.AUD): 1.49,
    (Currency.INR, Currency.USD): 0.012,
    (Currency.USD, Currency.INR): 83.0,
    (Currency.AUD, Currency.EUR): 0.61,
    (Currency.EUR, Currency.AUD): 1.64,
    (Currency.AUD, Currency.GBP): 0.53,
    (Currency.GBP, Currency.AUD): 1.89,
}


def parse_rate_key(key: str) -> tuple[Currency, Currency]:
    """Parse a ``"FROM_TO"`` key (as used in config files) into a currency pair."""
    source, _, target = key.partition("_")
    return Currency(source), Currency(target)


class CurrencyConverter:
    """Converts amounts between currencies using a fixed rate table.

    Args:
        rates: Directed rate table. Defaults to :data:`DEFAULT_EXCHANGE_RATES`.
        fallback_rate: Rate used for pairs without an entry.
        strict: Raise :class:`ExchangeRateError` instead of falling back.
    """

    def __init__(
        self,
        rates: RateTable | None = None,
        fallback_rate: float = 1.0,
        strict: bool = False,
    ):
        self._rates = dict(DEFAULT_EXCHANGE_RATES if rates is None else rates)
        self.fallback_rate = fallback_rate
        self.strict = strict

    @classmethod
    def from_overrides(
        cls,
        overrides: Mapping[str, float],
        fallback_rate: float = 1.0,
        strict: bool = False,
    ) -> CurrencyConverter:
        """Build a converter from the default table plus ``"FROM_TO": rate`` overrides."""
        rates = dict(DEFAULT_EXCHANGE_RATES)
        for key, rate in overrides.items():
            rates[parse_rate_key(key)] = float(rate)
        return cls(rates=rates, fallback_rate=fallback_rate, strict=strict)

    def has_rate(self, source: Currency, target: Currency) -> bool:
        """True if the table holds a directed entry for this pair."""
        return source == target or (Currency(source), Currency(target)) in self._rates

    def get_exchange_rate(self, source: Currency, target: Currency) -> float:
        """Return the rate applied when converting *source* into *target*."""
        if source == target:
            return 1.0

        pair = (Currency(source), Currency(target))
        rate = self._rates.get(pair)
        if rate is not None:
            return rate

        if self.strict:
            raise ExchangeRateError(f"No exchange rate for {pair[0]} -> {pair[1]}")
        logger.debug(f"No exchange rate for {pair[0]} -> {pair[1]}, using fallback {self.fallback_rate}")
        return self.fallback_rate

    def convert(self, amount: float, source: Currency, target: Currency) -> float:
        """Convert *amount* from *source* to *target*. No rounding is applied."""
        if source == target:
            return amount
        return amount * self.get_exchange_rate(source, target)
