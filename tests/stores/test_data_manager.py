"""Tests for DataManager: transactions, budgets, reminders, and analytics."""

from datetime import datetime, timedelta

import pytest

from fundfolio.core.dispatch import MainQueue
from fundfolio.financial.enums import BudgetPeriod, Currency, TransactionCategory
from fundfolio.financial.models import Budget, Reminder, Transaction
from fundfolio.storage import (
    MemoryStorage,
    budget_repository,
    reminder_repository,
    transaction_repository,
)
from fundfolio.stores import DataManager


def tx(amount, category="Food", currency="AUD", date=None, **kwargs):
    return Transaction(
        amount=amount,
        currency=currency,
        category=category,
        date=date or datetime(2026, 6, 17, 9),
        **kwargs,
    )


def make_manager(backend, now, **kwargs):
    return DataManager(
        transaction_repository(backend),
        budget_repository(backend),
        reminder_repository(backend),
        clock=lambda: now,
        **kwargs,
    )


class TestSeeding:
    def test_loads_samples_when_empty(self, now):
        manager = make_manager(MemoryStorage(), now)
        assert len(manager.transactions) == 4
        assert [b.category for b in manager.budgets] == [TransactionCategory.FOOD, TransactionCategory.TRANSPORT]
        assert [r.title for r in manager.reminders] == ["Monthly Rent", "Tuition Fee"]

    def test_existing_budgets_are_kept(self, now):
        backend = MemoryStorage()
        mine = Budget(category="Education", limit=500.0, currency="AUD", period="Monthly")
        budget_repository(backend).save([mine])
        manager = make_manager(backend, now)
        assert manager.budgets == (mine,)
        assert len(manager.transactions) == 4

    def test_saved_transactions_prevent_seeding(self, now):
        backend = MemoryStorage()
        transaction_repository(backend).save([tx(10.0)])
        manager = make_manager(backend, now)
        assert len(manager.transactions) == 1
        assert manager.budgets == ()
        assert manager.reminders == ()


class TestTransactions:
    def test_add(self, data):
        t = tx(50.0)
        assert data.add_transaction(50.0, t) is True
        assert data.transactions == (t,)

    @pytest.mark.parametrize("guard", [0, -1])
    def test_add_rejects_non_positive_guard(self, data, guard):
        assert data.add_transaction(guard, tx(50.0)) is False
        assert data.transactions == ()

    def test_update_and_delete(self, data):
        t = tx(50.0, description="Lunch")
        data.add_transaction(50.0, t)
        edited = Transaction(
            amount=55.0, currency=t.currency, category=t.category, description="Lunch + tip", date=t.date, id=t.id
        )
        data.update_transaction(edited)
        assert data.transactions == (edited,)
        data.delete_transaction(t.id)
        assert data.transactions == ()

    def test_add_duplicate_id_raises(self, data):
        t = tx(50.0)
        data.add_transaction(50.0, t)
        with pytest.raises(ValueError, match="already exists"):
            data.add_transaction(50.0, t)
        assert data.transactions == (t,)

    def test_update_unknown_is_ignored(self, data):
        data.update_transaction(tx(5.0))
        assert data.transactions == ()

    def test_recent_transactions_newest_first(self, data):
        for day in range(1, 8):
            data.add_transaction(1.0, tx(1.0, date=datetime(2026, 6, day)))
        recent = data.recent_transactions()
        assert [t.date.day for t in recent] == [7, 6, 5, 4, 3]

    def test_transactions_for_account(self, data):
        data.add_transaction(1.0, tx(1.0, account_id="a"))
        data.add_transaction(2.0, tx(2.0, account_id="b"))
        assert [t.amount for t in data.transactions_for_account("a")] == [1.0]

    def test_persisted(self, backend, data, now):
        data.add_transaction(12.0, tx(12.0))
        assert len(make_manager(backend, now, seed_samples=False).transactions) == 1


class TestSpentAmount:
    def test_weekly_excludes_other_weeks(self, data):
        data.add_transaction(30.0, tx(30.0, date=datetime(2026, 6, 15)))  # Monday, this week
        data.add_transaction(20.0, tx(20.0, date=datetime(2026, 6, 17, 8)))
        data.add_transaction(99.0, tx(99.0, date=datetime(2026, 6, 14)))  # last week
        assert data.get_spent_amount(TransactionCategory.FOOD, BudgetPeriod.WEEKLY, Currency.AUD) == 50.0

    def test_monthly_and_yearly(self, data):
        data.add_transaction(30.0, tx(30.0, date=datetime(2026, 6, 1)))
        data.add_transaction(20.0, tx(20.0, date=datetime(2026, 2, 1)))
        assert data.get_spent_amount("Food", BudgetPeriod.MONTHLY, Currency.AUD) == 30.0
        assert data.get_spent_amount("Food", BudgetPeriod.YEARLY, Currency.AUD) == 50.0

    def test_only_matching_category(self, data):
        data.add_transaction(30.0, tx(30.0, category="Food"))
        data.add_transaction(25.0, tx(25.0, category="Transport"))
        assert data.get_spent_amount(TransactionCategory.TRANSPORT, BudgetPeriod.WEEKLY, Currency.AUD) == 25.0

    def test_income_never_counted(self, data):
        data.add_transaction(2000.0, tx(2000.0, category="Income"))
        assert data.get_spent_amount(TransactionCategory.INCOME, BudgetPeriod.YEARLY, Currency.AUD) == 0

    def test_converts_to_requested_currency(self, data):
        data.add_transaction(1000.0, tx(1000.0, currency="INR"))
        assert data.get_spent_amount("Food", BudgetPeriod.WEEKLY, Currency.AUD) == pytest.approx(18.0)

    def test_does_not_touch_budget_spent(self, data):
        budget = Budget(category="Food", limit=200.0, currency="AUD", period="Weekly")
        data.add_budget(budget)
        data.add_transaction(30.0, tx(30.0))
        data.get_spent_amount("Food", BudgetPeriod.WEEKLY, Currency.AUD)
        assert data.budgets[0].spent == 0.0


class TestBudgets:
    def test_find_budget_returns_first_match(self, data):
        first = Budget(category="Food", limit=200.0, currency="AUD", period="Weekly")
        second = Budget(category="Food", limit=900.0, currency="INR", period="Monthly")
        data.add_budget(first)
        data.add_budget(second)
        assert data.find_budget(TransactionCategory.FOOD) == first
        assert data.find_budget(TransactionCategory.EDUCATION) is None

    def test_record_budget_spend(self, data):
        budget = Budget(category="Food", limit=200.0, currency="AUD", period="Weekly", spent=150.0)
        data.add_budget(budget)
        updated = data.record_budget_spend(budget.id, 60.0)
        assert updated.spent == 210.0
        assert updated.is_over_budget
        assert data.budgets[0] == updated

    def test_add_duplicate_id_raises(self, data):
        budget = Budget(category="Food", limit=200.0, currency="AUD", period="Weekly")
        data.add_budget(budget)
        with pytest.raises(ValueError, match="already exists"):
            data.add_budget(budget)
        assert data.budgets == (budget,)

    def test_record_spend_unknown_budget(self, data):
        assert data.record_budget_spend("missing", 10.0) is None

    def test_update_and_delete(self, data):
        budget = Budget(category="Food", limit=200.0, currency="AUD", period="Weekly")
        data.add_budget(budget)
        raised = Budget(category="Food", limit=300.0, currency="AUD", period="Weekly", id=budget.id)
        data.update_budget(raised)
        assert data.budgets == (raised,)
        data.delete_budget(raised)
        assert data.budgets == ()


class TestReminders:
    def test_add_is_deferred(self, data):
        reminder = Reminder(title="Rent", due_date=datetime(2026, 6, 20), reminder_type="Rent")
        data.add_reminder(reminder)
        assert data.reminders == ()
        assert isinstance(data.dispatcher, MainQueue)
        assert data.dispatcher.run_pending() == 1
        assert data.reminders == (reminder,)

    def test_add_persists_after_dispatch(self, backend, data, now):
        data.add_reminder(Reminder(title="Rent", due_date=datetime(2026, 6, 20), reminder_type="Rent"))
        assert make_manager(backend, now, seed_samples=False).reminders == ()
        data.dispatcher.run_pending()
        assert len(make_manager(backend, now, seed_samples=False).reminders) == 1

    def test_duplicate_reminder_added_once(self, data):
        reminder = Reminder(title="Rent", due_date=datetime(2026, 6, 20), reminder_type="Rent")
        data.add_reminder(reminder)
        data.add_reminder(reminder)
        assert data.dispatcher.run_pending() == 2
        assert data.reminders == (reminder,)

    def test_custom_dispatcher(self, backend, now):
        calls = []

        class Immediate:
            def dispatch(self, callback):
                calls.append(callback)
                callback()

        manager = make_manager(backend, now, dispatcher=Immediate(), seed_samples=False)
        manager.add_reminder(Reminder(title="Bill", due_date=now, reminder_type="Bill"))
        assert len(calls) == 1
        assert len(manager.reminders) == 1

    def test_toggle_completion(self, data):
        reminder = Reminder(title="Rent", due_date=datetime(2026, 6, 20), reminder_type="Rent")
        data.add_reminder(reminder)
        data.dispatcher.run_pending()
        assert data.toggle_reminder_completion(reminder).is_completed is True
        assert data.toggle_reminder_completion(reminder.id).is_completed is False
        assert data.toggle_reminder_completion("missing") is None

    def test_delete(self, data):
        reminder = Reminder(title="Rent", due_date=datetime(2026, 6, 20), reminder_type="Rent")
        data.add_reminder(reminder)
        data.dispatcher.run_pending()
        data.delete_reminder(reminder)
        assert data.reminders == ()

    def test_upcoming_reminders(self, data, now):
        for days, title in [(6, "c"), (1, "a"), (3, "b"), (5, "d"), (10, "far")]:
            data.add_reminder(Reminder(title=title, due_date=now + timedelta(days=days), reminder_type="Bill"))
        data.add_reminder(
            Reminder(title="done", due_date=now + timedelta(hours=1), reminder_type="Bill", is_completed=True)
        )
        data.dispatcher.run_pending()

        upcoming = data.get_upcoming_reminders()
        assert [r.title for r in upcoming] == ["a", "b", "d"]

    def test_overdue_reminders_are_upcoming_and_overdue(self, data, now):
        late = Reminder(title="late", due_date=now - timedelta(days=2), reminder_type="Rent")
        data.add_reminder(late)
        data.dispatcher.run_pending()
        assert data.get_upcoming_reminders() == [late]
        assert data.get_overdue_reminders() == [late]


class TestAnalytics:
    @pytest.fixture
    def history(self, data):
        data.add_transaction(2000.0, tx(2000.0, category="Income"))
        data.add_transaction(50.0, tx(50.0, category="Food"))
        data.add_transaction(1000.0, tx(1000.0, category="Transport", currency="INR"))
        return data

    def test_income(self, history):
        assert history.get_income_amount(Currency.AUD) == 2000.0

    def test_expense(self, history):
        assert history.get_expense_amount(Currency.AUD) == pytest.approx(50.0 + 18.0)

    def test_total_balance(self, history):
        assert history.get_total_balance(Currency.AUD) == pytest.approx(2000.0 - 68.0)

    def test_empty(self, data):
        assert data.get_total_balance(Currency.INR) == 0
