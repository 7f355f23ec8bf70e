"""fundfolio loans / pay-emi — loan commands."""

from __future__ import annotations

import click


@click.command()
@click.pass_context
def loans(ctx: click.Context) -> None:
    """List loans with EMI progress."""
    from fundfolio.core.cli.common import open_app

    app = open_app(ctx)
    if not app.loans.loans:
        click.echo("No loans.")
        return
    for loan in app.loans.loans:
        fmt = loan.currency.format
        click.echo(
            f"{loan.loan_id}  {loan.bank_name:<16} EMI {fmt(loan.emi_amount)}  "
            f"paid {loan.emi_paid_count}/{loan.tenure_months}  outstanding {fmt(loan.outstanding)}"
        )


@click.command("pay-emi")
@click.argument("loan_id")
@click.pass_context
def pay_emi(ctx: click.Context, loan_id: str) -> None:
    """Pay the next EMI on LOAN_ID from its linked account."""
    from fundfolio.core.cli.common import fail, open_app

    app = open_app(ctx)
    loan = app.loans.get_by_id(loan_id)
    if loan is None:
        fail(f"No loan with id {loan_id}.")

    if not app.pay_next_emi(loan_id):
        if loan.emi_left == 0:
            fail("All EMIs have been paid.")
        elif loan.linked_account_id and app.accounts.get_by_id(loan.linked_account_id) is None:
            fail("Linked account not found.")
        else:
            fail("Insufficient funds in linked account.")

    loan = app.loans.get_by_id(loan_id)
    click.echo(f"Paid EMI {loan.emi_paid_count}/{loan.tenure_months}. {loan.emi_left} left.")
