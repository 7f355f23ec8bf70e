"""FundFolio CLI — entry point for summary, account, loan, and reminder commands."""

import click

from fundfolio import __version__


@click.group()
@click.version_option(version=__version__, package_name="fundfolio")
@click.option(
    "--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file."
)
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Where collections are stored.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, data_dir: str | None) -> None:
    """FundFolio — track accounts, loans, budgets, and reminders."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["data_dir"] = data_dir


# Register subcommands
from .account_cmd import accounts, deposit, withdraw
from .loan_cmd import loans, pay_emi
from .reminder_cmd import remind, reminders
from .summary_cmd import summary

main.add_command(summary)
main.add_command(accounts)
main.add_command(deposit)
main.add_command(withdraw)
main.add_command(loans)
main.add_command(pay_emi)
main.add_command(reminders)
main.add_command(remind)
