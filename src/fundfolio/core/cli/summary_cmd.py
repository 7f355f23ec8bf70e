"""fundfolio summary — dashboard totals."""

from __future__ import annotations

import click

from fundfolio.financial.enums import Currency


@click.command()
@click.option(
    "--currency",
    type=click.Choice([c.value for c in Currency]),
    default=None,
    help="Display currency (defaults to currency.default).",
)
@click.pass_context
def summary(ctx: click.Context, currency: str | None) -> None:
    """Show balances, income, spending, and what's due soon."""
    from fundfolio.core.cli.common import open_app

    app = open_app(ctx)
    dashboard = app.dashboard
    shown = Currency(currency) if currency else dashboard.currency

    click.echo(f"Total balance:     {shown.format(dashboard.total_balance(shown))}")
    click.echo(f"Account balances:  {shown.format(dashboard.total_account_balance(shown))}")
    click.echo(f"Income:            {shown.format(dashboard.total_income(shown))}")
    click.echo(f"Expenses:          {shown.format(dashboard.total_expenses(shown))}")
    click.echo(f"Loans outstanding: {shown.format(dashboard.total_loan_outstanding(shown))}")

    upcoming = dashboard.upcoming_reminders()
    if upcoming:
        click.echo("\nDue soon:")
        for reminder in upcoming:
            click.echo(f"  {reminder.due_date:%Y-%m-%d}  {reminder.title}")

    recent = dashboard.recent_transactions()
    if recent:
        click.echo("\nRecent transactions:")
        for tx in recent:
            sign = "+" if tx.is_income else "-"
            click.echo(f"  {tx.date:%Y-%m-%d}  {sign}{tx.currency.format(tx.amount)}  {tx.category}  {tx.description}")
