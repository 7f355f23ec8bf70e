"""Tests for deposits and withdrawals across accounts, budgets, and transactions."""

import pytest

from fundfolio.core.exceptions import AccountNotFoundError, InsufficientFundsError, InvalidAmountError
from fundfolio.financial.enums import TransactionCategory
from fundfolio.financial.models import Budget
from fundfolio.stores import AccountActivity


@pytest.fixture
def activity(accounts, data):
    return AccountActivity(accounts, data)


@pytest.fixture
def food_budget(data):
    budget = Budget(category="Food", limit=200.0, currency="AUD", period="Weekly")
    data.add_budget(budget)
    return budget


class TestWithdraw:
    def test_updates_all_three_collections(self, activity, accounts, data, aud_account, food_budget):
        tx = activity.withdraw(aud_account.account_id, 40.0, TransactionCategory.FOOD, "Groceries")

        assert accounts.get_by_id(aud_account.account_id).balance == 960.0
        assert data.budgets[0].spent == 40.0
        assert data.transactions == (tx,)
        assert tx.amount == 40.0
        assert tx.currency == aud_account.currency
        assert tx.category is TransactionCategory.FOOD
        assert tx.description == "Groceries"
        assert tx.account_id == aud_account.account_id

    def test_rejected_withdrawal_changes_nothing(self, activity, accounts, data, aud_account, food_budget):
        with pytest.raises(InsufficientFundsError, match="only 1000.0 is available"):
            activity.withdraw(aud_account.account_id, 5000.0, TransactionCategory.FOOD)

        assert accounts.get_by_id(aud_account.account_id).balance == 1000.0
        assert data.budgets == (food_budget,)
        assert data.transactions == ()

    def test_budget_charged_in_budget_currency(self, activity, data, inr_account, food_budget):
        activity.withdraw(inr_account.account_id, 1000.0, "Food")
        assert data.budgets[0].spent == pytest.approx(18.0)
        # the transaction stays in the account's currency
        assert data.transactions[0].amount == 1000.0
        assert data.transactions[0].currency == inr_account.currency

    def test_only_first_matching_budget_is_charged(self, activity, data, aud_account, food_budget):
        second = Budget(category="Food", limit=50.0, currency="AUD", period="Monthly")
        data.add_budget(second)
        activity.withdraw(aud_account.account_id, 10.0, TransactionCategory.FOOD)
        assert [b.spent for b in data.budgets] == [10.0, 0.0]

    def test_no_matching_budget(self, activity, data, aud_account, food_budget):
        activity.withdraw(aud_account.account_id, 10.0, TransactionCategory.ENTERTAINMENT)
        assert data.budgets[0].spent == 0.0
        assert len(data.transactions) == 1

    def test_default_category_and_description(self, activity, aud_account):
        tx = activity.withdraw(aud_account.account_id, 10.0)
        assert tx.category is TransactionCategory.OTHER
        assert tx.description == "Withdrawal"

    def test_can_go_over_budget(self, activity, data, aud_account, food_budget):
        activity.withdraw(aud_account.account_id, 250.0, TransactionCategory.FOOD)
        assert data.budgets[0].is_over_budget

    @pytest.mark.parametrize("amount", [0, -5, float("nan"), float("inf")])
    def test_rejects_non_positive(self, activity, accounts, data, aud_account, amount):
        with pytest.raises(InvalidAmountError):
            activity.withdraw(aud_account.account_id, amount)
        assert accounts.get_by_id(aud_account.account_id).balance == 1000.0
        assert data.transactions == ()

    def test_unknown_account(self, activity):
        with pytest.raises(AccountNotFoundError):
            activity.withdraw("missing", 10.0)


class TestDeposit:
    def test_credits_and_logs_income(self, activity, accounts, data, aud_account, food_budget):
        tx = activity.deposit(aud_account.account_id, 500.0, "Salary")
        assert accounts.get_by_id(aud_account.account_id).balance == 1500.0
        assert tx.is_income
        assert tx.description == "Salary"
        assert data.transactions == (tx,)
        assert data.budgets[0].spent == 0.0

    def test_default_description(self, activity, aud_account):
        assert activity.deposit(aud_account.account_id, 1.0).description == "Deposit"

    @pytest.mark.parametrize("amount", [0, -5, float("nan"), float("inf")])
    def test_rejects_non_positive(self, activity, accounts, data, aud_account, amount):
        with pytest.raises(InvalidAmountError):
            activity.deposit(aud_account.account_id, amount)
        assert accounts.get_by_id(aud_account.account_id).balance == 1000.0
        assert data.transactions == ()

    def test_unknown_account(self, activity):
        with pytest.raises(AccountNotFoundError):
            activity.deposit("missing", 10.0)
