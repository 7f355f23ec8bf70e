"""Composition root: builds every store around one storage backend.

Usage::

    from fundfolio.app import FundFolioApp
    from fundfolio.core.config import Config

    app = FundFolioApp.from_config(Config())
    app.activity.withdraw(account_id, 40.0, "Food")
    app.dashboard.total_balance()
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from fundfolio.core.config import Config
from fundfolio.core.dispatch import Dispatcher
from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.enums import Currency
from fundfolio.storage import (
    LocalStorage,
    StorageBackend,
    account_repository,
    budget_repository,
    loan_repository,
    reminder_repository,
    transaction_repository,
)
from fundfolio.stores import AccountActivity, AccountsStore, Dashboard, DataManager, LoanStore


class FundFolioApp:
    """All stores, wired to a shared backend, converter, and dispatcher."""

    def __init__(
        self,
        backend: StorageBackend,
        converter: CurrencyConverter | None = None,
        dispatcher: Dispatcher | None = None,
        currency: Currency = Currency.AUD,
        seed_samples: bool = True,
        allow_unresolved_link: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.backend = backend
        self.converter = converter or CurrencyConverter()

        self.accounts = AccountsStore(account_repository(backend), seed_samples=seed_samples)
        self.loans = LoanStore(
            loan_repository(backend),
            seed_samples=seed_samples,
            allow_unresolved_link=allow_unresolved_link,
        )
        self.data = DataManager(
            transaction_repository(backend),
            budget_repository(backend),
            reminder_repository(backend),
            converter=self.converter,
            dispatcher=dispatcher,
            clock=clock,
            seed_samples=seed_samples,
        )
        self.activity = AccountActivity(self.accounts, self.data, self.converter)
        self.dashboard = Dashboard(self.accounts, self.data, self.loans, self.converter, currency)

    @property
    def dispatcher(self) -> Dispatcher:
        return self.data.dispatcher

    def pay_next_emi(self, loan_id: str) -> bool:
        return self.loans.pay_next_emi(loan_id, self.accounts)

    @classmethod
    def from_config(cls, config: Config, dispatcher: Dispatcher | None = None) -> FundFolioApp:
        """Build the app from a :class:`Config`, storing data under ``paths.storage_dir``."""
        settings = config.validated()
        storage_dir = settings.paths.storage_dir or settings.paths.data_dir / "storage"
        converter = CurrencyConverter.from_overrides(
            settings.currency.rates,
            fallback_rate=settings.currency.fallback_rate,
            strict=settings.currency.strict,
        )
        logger.debug(f"Opening FundFolio data at {storage_dir}")
        return cls(
            backend=LocalStorage(str(storage_dir)),
            converter=converter,
            dispatcher=dispatcher,
            currency=settings.currency.default,
            seed_samples=settings.bootstrap.sample_data,
            allow_unresolved_link=settings.loans.allow_unresolved_link,
        )
