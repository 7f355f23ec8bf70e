"""fundfolio accounts / deposit / withdraw — bank account commands."""

from __future__ import annotations

import click

from fundfolio.financial.enums import TransactionCategory


@click.command()
@click.pass_context
def accounts(ctx: click.Context) -> None:
    """List bank accounts and their balances."""
    from fundfolio.core.cli.common import open_app

    app = open_app(ctx)
    if not app.accounts.accounts:
        click.echo("No accounts.")
        return
    for account in app.accounts.accounts:
        click.echo(f"{account.account_id}  {account.bank_name:<22} {account.currency.format(account.balance)}")


@click.command()
@click.argument("account_id")
@click.argument("amount", type=float)
@click.option("--description", "-d", default=None, help="Defaults to 'Deposit'.")
@click.pass_context
def deposit(ctx: click.Context, account_id: str, amount: float, description: str | None) -> None:
    """Deposit AMOUNT into ACCOUNT_ID."""
    from fundfolio.core.cli.common import fail, open_app
    from fundfolio.core.exceptions import FundFolioError

    app = open_app(ctx)
    try:
        app.activity.deposit(account_id, amount, description)
    except FundFolioError as e:
        fail(f"Deposit failed: {e}")
    account = app.accounts.get_by_id(account_id)
    click.echo(f"New balance: {account.currency.format(account.balance)}")


@click.command()
@click.argument("account_id")
@click.argument("amount", type=float)
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in TransactionCategory.spending()]),
    default=TransactionCategory.OTHER.value,
    show_default=True,
)
@click.option("--description", "-d", default=None, help="Defaults to 'Withdrawal'.")
@click.pass_context
def withdraw(ctx: click.Context, account_id: str, amount: float, category: str, description: str | None) -> None:
    """Withdraw AMOUNT from ACCOUNT_ID, charging the matching budget."""
    from fundfolio.core.cli.common import fail, open_app
    from fundfolio.core.exceptions import FundFolioError

    app = open_app(ctx)
    try:
        app.activity.withdraw(account_id, amount, TransactionCategory(category), description)
    except FundFolioError as e:
        fail(f"Withdrawal failed: {e}")
    account = app.accounts.get_by_id(account_id)
    click.echo(f"New balance: {account.currency.format(account.balance)}")
