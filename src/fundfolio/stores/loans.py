"""Loan store: owns loans and orchestrates EMI payments."""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from fundfolio.core.exceptions import InsufficientFundsError
from fundfolio.financial.calculators.currency import CurrencyConverter
from fundfolio.financial.enums import Currency
from fundfolio.financial.models import Loan
from fundfolio.storage.repository import CollectionRepository

from .accounts import AccountsStore
from .samples import sample_loans


class LoanStore:
    """Ordered collection of loans, unique by ``loan_id``.

    Args:
        repository: Persistence for the loan collection.
        seed_samples: Load a sample loan when nothing is saved yet.
        allow_unresolved_link: When a loan names a linked account that no
            longer exists, pay the EMI without any deduction instead of
            failing the payment.
    """

    def __init__(
        self,
        repository: CollectionRepository[Loan],
        seed_samples: bool = True,
        allow_unresolved_link: bool = False,
    ) -> None:
        self._repository = repository
        self.allow_unresolved_link = allow_unresolved_link
        self._loans: list[Loan] = repository.load()
        if not self._loans and seed_samples:
            logger.info("No saved loans, loading sample loans")
            self._loans = sample_loans()
            self._save()

    def _save(self) -> None:
        self._repository.save(self._loans)

    def _index_of(self, loan_id: str) -> int | None:
        for i, loan in enumerate(self._loans):
            if loan.loan_id == loan_id:
                return i
        return None

    @property
    def loans(self) -> tuple[Loan, ...]:
        return tuple(self._loans)

    def __len__(self) -> int:
        return len(self._loans)

    def get_by_id(self, loan_id: str) -> Loan | None:
        index = self._index_of(loan_id)
        return None if index is None else self._loans[index]

    def total_outstanding(self, currency: Currency, converter: CurrencyConverter) -> float:
        """Sum of outstanding amounts across all loans, converted to *currency*."""
        return sum(converter.convert(loan.outstanding, loan.currency, currency) for loan in self._loans)

    def add(self, loan: Loan) -> None:
        if self._index_of(loan.loan_id) is not None:
            raise ValueError(f"Loan {loan.loan_id} already exists")
        self._loans.append(loan)
        self._save()
        logger.debug(f"Added loan {loan.bank_name} ({loan.loan_id})")

    def remove(self, loan: Loan | str) -> None:
        """Remove by id. Unknown ids are ignored; linked accounts are untouched."""
        loan_id = loan if isinstance(loan, str) else loan.loan_id
        index = self._index_of(loan_id)
        if index is None:
            return
        del self._loans[index]
        self._save()

    def pay_next_emi(self, loan: Loan | str, accounts: AccountsStore) -> bool:
        """Pay one installment, debiting the linked account if there is one.

        Returns False, changing nothing, when every EMI is already paid,
        when the linked account cannot cover the EMI, or when the linked
        account cannot be found (unless ``allow_unresolved_link``).
        """
        loan_id = loan if isinstance(loan, str) else loan.loan_id
        index = self._index_of(loan_id)
        if index is None:
            logger.warning(f"EMI payment for unknown loan {loan_id}")
            return False

        current = self._loans[index]
        if current.emi_left == 0:
            return False

        emi = current.emi_amount
        linked = None
        if current.linked_account_id is not None:
            linked = accounts.get_by_id(current.linked_account_id)
            if linked is None and not self.allow_unresolved_link:
                logger.warning(
                    f"Loan {current.loan_id} is linked to missing account {current.linked_account_id}; EMI not paid"
                )
                return False

        if linked is not None:
            try:
                accounts.withdraw(linked.account_id, emi)
            except InsufficientFundsError:
                return False

        self._loans[index] = replace(current, emi_paid_count=current.emi_paid_count + 1)
        self._save()
        logger.debug(f"Paid EMI {current.emi_paid_count + 1}/{current.tenure_months} on loan {current.loan_id}")
        return True
