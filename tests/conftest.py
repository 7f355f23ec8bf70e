"""Shared test fixtures for fundfolio."""

import os
import tempfile
from datetime import datetime

import pytest

from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.enums import Currency
from fundfolio.financial.models import Account
from fundfolio.storage import (
    MemoryStorage,
    account_repository,
    budget_repository,
    loan_repository,
    reminder_repository,
    transaction_repository,
)
from fundfolio.stores import AccountsStore, DataManager, LoanStore

# Wednesday, mid-month: ISO week, month and year boundaries are all a few days away.
FIXED_NOW = datetime(2026, 6, 17, 12, 0, 0)


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "storage_dir": os.path.join(tmp_dir, "storage"),
        },
        "currency": {"default": "INR"},
        "bootstrap": {"sample_data": False},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest.fixture
def converter():
    return CurrencyConverter()


@pytest.fixture
def accounts(backend):
    """Empty accounts store (no sample data)."""
    return AccountsStore(account_repository(backend), seed_samples=False)


@pytest.fixture
def loans(backend):
    return LoanStore(loan_repository(backend), seed_samples=False)


@pytest.fixture
def data(backend, converter, now):
    """Empty data manager on a fixed clock."""
    return DataManager(
        transaction_repository(backend),
        budget_repository(backend),
        reminder_repository(backend),
        converter=converter,
        clock=lambda: now,
        seed_samples=False,
    )


@pytest.fixture
def aud_account(accounts):
    account = Account(bank_name="Commonwealth Bank", currency=Currency.AUD, balance=1000.0)
    accounts.add(account)
    return account


@pytest.fixture
def inr_account(accounts):
    account = Account(bank_name="HDFC", currency=Currency.INR, balance=200_000.0)
    accounts.add(account)
    return account
