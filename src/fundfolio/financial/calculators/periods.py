"""Calendar period membership for budgets."""

from datetime import datetime

from ..enums import BudgetPeriod


def is_in_current_period(when: datetime, period: BudgetPeriod, now: datetime | None = None) -> bool:
    """Check whether *when* falls in the same week, month, or year as *now*.

    Weeks are ISO weeks (Monday start), so a date in late December can
    share a week with early January of the next year.
    """
    now = now or datetime.now()

    if period == BudgetPeriod.WEEKLY:
        return when.isocalendar()[:2] == now.isocalendar()[:2]
    if period == BudgetPeriod.MONTHLY:
        return (when.year, when.month) == (now.year, now.month)
    if period == BudgetPeriod.YEARLY:
        return when.year == now.year
    raise ValueError(f"Unknown budget period: {period}")
