"""Entity <-> JSON-compatible dict conversion.

Field names are the camelCase wire names the app has always persisted
(``accountId``, ``bankName``, ...). Enumerations travel as their string
tags, datetimes as ISO-8601 strings, and optional fields are omitted when
unset. Decoders raise ``KeyError``/``ValueError``/``TypeError`` on
malformed input; :class:`~fundfolio.storage.repository.CollectionRepository`
turns those into an empty collection.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fundfolio.financial.models import Account, Budget, Loan, Reminder, Transaction


def _format_datetime(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.isoformat()


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO-8601 string, got {type(value).__name__}")
    return datetime.fromisoformat(value)


def _put_optional(data: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        data[key] = value


# -- Account -------------------------------------------------------------


def encode_account(account: Account) -> dict[str, Any]:
    return {
        "accountId": account.account_id,
        "bankName": account.bank_name,
        "currency": account.currency.value,
        "amount": account.balance,
    }


def decode_account(data: dict[str, Any]) -> Account:
    return Account(
        account_id=str(data["accountId"]),
        bank_name=data["bankName"],
        currency=data["currency"],
        balance=float(data["amount"]),
    )


# -- Loan ----------------------------------------------------------------


def encode_loan(loan: Loan) -> dict[str, Any]:
    """Encode a loan in the account-shaped wire form.

    ``amount`` mirrors the principal so the object still carries every
    Account field.
    """
    data: dict[str, Any] = {
        "accountId": loan.loan_id,
        "bankName": loan.bank_name,
        "currency": loan.currency.value,
        "amount": loan.loan_amount,
        "loanAmount": loan.loan_amount,
        "interestRate": loan.interest_rate,
        "tenureMonths": loan.tenure_months,
        "emiPaidCount": loan.emi_paid_count,
    }
    _put_optional(data, "linkedBankAccountId", loan.linked_account_id)
    return data


def decode_loan(data: dict[str, Any]) -> Loan:
    linked = data.get("linkedBankAccountId")
    return Loan(
        loan_id=str(data["accountId"]),
        bank_name=data["bankName"],
        currency=data["currency"],
        loan_amount=float(data["loanAmount"]),
        interest_rate=float(data["interestRate"]),
        tenure_months=int(data["tenureMonths"]),
        emi_paid_count=int(data["emiPaidCount"]),
        linked_account_id=str(linked) if linked is not None else None,
    )


# -- Transaction ---------------------------------------------------------


def encode_transaction(tx: Transaction) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": tx.id,
        "amount": tx.amount,
        "currency": tx.currency.value,
        "date": _format_datetime(tx.date),
        "category": tx.category.value,
        "description": tx.description,
    }
    _put_optional(data, "accountId", tx.account_id)
    return data


def decode_transaction(data: dict[str, Any]) -> Transaction:
    return Transaction(
        id=str(data["id"]),
        amount=float(data["amount"]),
        currency=data["currency"],
        date=_parse_datetime(data["date"]),
        category=data["category"],
        description=data.get("description", ""),
        account_id=data.get("accountId"),
    )


# -- Budget --------------------------------------------------------------


def encode_budget(budget: Budget) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": budget.id,
        "category": budget.category.value,
        "limit": budget.limit,
        "currency": budget.currency.value,
        "period": budget.period.value,
        "spent": budget.spent,
    }
    _put_optional(data, "dueDate", _format_datetime(budget.due_date))
    return data


def decode_budget(data: dict[str, Any]) -> Budget:
    due = data.get("dueDate")
    return Budget(
        id=str(data["id"]),
        category=data["category"],
        limit=float(data["limit"]),
        currency=data["currency"],
        period=data["period"],
        due_date=_parse_datetime(due) if due is not None else None,
        spent=float(data.get("spent", 0.0)),
    )


# -- Reminder ------------------------------------------------------------


def encode_reminder(reminder: Reminder) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": reminder.id,
        "title": reminder.title,
        "dueDate": _format_datetime(reminder.due_date),
        "isCompleted": reminder.is_completed,
        "reminderType": reminder.reminder_type.value,
    }
    _put_optional(data, "amount", reminder.amount)
    return data


def decode_reminder(data: dict[str, Any]) -> Reminder:
    amount = data.get("amount")
    return Reminder(
        id=str(data["id"]),
        title=data["title"],
        amount=float(amount) if amount is not None else None,
        due_date=_parse_datetime(data["dueDate"]),
        is_completed=bool(data.get("isCompleted", False)),
        reminder_type=data["reminderType"],
    )
