"""EMI (equated monthly installment) math for amortizing loans.

Pure math, no external dependencies. Rates are annual percentages
(9.5 means 9.5% per year), tenures are in months.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AmortizationRow:
    """One month of an amortization schedule."""

    month: int
    payment: float
    interest: float
    principal: float
    balance: float  # Remaining principal after this payment


def monthly_rate(annual_rate: float) -> float:
    """Convert an annual percentage rate to a monthly fraction."""
    return annual_rate / 12 / 100


def calculate_emi(principal: float, annual_rate: float, tenure_months: int) -> float:
    """Calculate the fixed monthly installment for an amortizing loan.

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as a percentage (e.g., 9.5)
        tenure_months: Number of monthly installments

    Returns:
        Monthly installment. With a zero rate this is principal / tenure.
    """
    if tenure_months <= 0:
        raise ValueError(f"Tenure must be at least one month, got {tenure_months}")

    r = monthly_rate(annual_rate)
    n = tenure_months
    growth = (1 + r) ** n
    # Rates too small to move (1 + r) off 1.0 behave like a zero rate
    if growth == 1.0:
        return principal / n
    return principal * r * growth / (growth - 1)


def amortization_schedule(principal: float, annual_rate: float, tenure_months: int) -> list[AmortizationRow]:
    """Split each installment into interest and principal, month by month.

    The last row absorbs floating-point residue so the closing balance is 0.
    """
    emi = calculate_emi(principal, annual_rate, tenure_months)
    r = monthly_rate(annual_rate)
    balance = principal
    rows = []

    for month in range(1, tenure_months + 1):
        interest = balance * r
        repaid = emi - interest
        if month == tenure_months:
            repaid = balance
        balance = max(0.0, balance - repaid)
        rows.append(
            AmortizationRow(
                month=month,
                payment=emi,
                interest=interest,
                principal=repaid,
                balance=balance,
            )
        )

    return rows
