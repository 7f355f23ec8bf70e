"""fundfolio reminders / remind — payment reminder commands."""

from __future__ import annotations

from datetime import datetime

import click

from fundfolio.financial.enums import ReminderType


@click.command()
@click.option("--all", "show_all", is_flag=True, help="Include completed reminders.")
@click.pass_context
def reminders(ctx: click.Context, show_all: bool) -> None:
    """List reminders, flagging overdue ones."""
    from fundfolio.core.cli.common import open_app

    app = open_app(ctx)
    overdue = {r.id for r in app.data.get_overdue_reminders()}
    shown = [r for r in app.data.reminders if show_all or not r.is_completed]
    if not shown:
        click.echo("No reminders.")
        return
    for reminder in sorted(shown, key=lambda r: r.due_date):
        status = "done" if reminder.is_completed else ("OVERDUE" if reminder.id in overdue else "open")
        click.echo(f"{reminder.due_date:%Y-%m-%d}  [{status}]  {reminder.reminder_type:<8} {reminder.title}")


@click.command()
@click.argument("title")
@click.argument("due", type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M"]))
@click.option(
    "--type",
    "reminder_type",
    type=click.Choice([t.value for t in ReminderType]),
    default=ReminderType.OTHER.value,
    show_default=True,
)
@click.option("--amount", type=float, default=None)
@click.pass_context
def remind(ctx: click.Context, title: str, due: datetime, reminder_type: str, amount: float | None) -> None:
    """Add a reminder TITLE due on DUE (YYYY-MM-DD)."""
    from fundfolio.core.cli.common import open_app
    from fundfolio.core.dispatch import MainQueue
    from fundfolio.financial.models import Reminder

    app = open_app(ctx)
    app.data.add_reminder(Reminder(title=title, due_date=due, reminder_type=reminder_type, amount=amount))
    if isinstance(app.dispatcher, MainQueue):
        app.dispatcher.run_pending()
    click.echo(f"Reminder added for {due:%Y-%m-%d}.")
