"""Financial statement commands."""

from pathlib import Path

import click

from farmbooks.cli.parsing import format_money, parse_date_or_exit
from farmbooks.domain.export import StatementKind
from farmbooks.domain.reports import ReportService

OWNERS_EQUITY_LABEL = "Owner's Equity"

KIND_ALIASES = {
    "pnl": StatementKind.PROFIT_AND_LOSS,
    "balance-sheet": StatementKind.BALANCE_SHEET,
    "cash-flow": StatementKind.CASH_FLOW,
    "owners-equity": StatementKind.OWNERS_EQUITY,
}


@click.group()
def report_group():
    """Financial statements."""
    pass


@report_group.command("pnl")
@click.pass_context
def profit_and_loss(ctx):
    """Profit & loss statement, all time to date."""
    statement = ReportService(ctx.obj["store"]).profit_and_loss()

    click.echo("\nREVENUE")
    for row in statement.revenue:
        click.echo(f"  {row.name:<30} {format_money(row.amount):>14}")
    click.echo(f"  {'Total Revenue':<30} {format_money(statement.total_revenue):>14}")
    click.echo("\nOPERATING EXPENSES")
    for row in statement.expenses:
        click.echo(f"  {row.name:<30} {format_money(row.amount):>14}")
    click.echo(f"  {'Total Expenses':<30} {format_money(statement.total_expenses):>14}")
    click.echo(f"\nNET INCOME {format_money(statement.net_income)}")


@report_group.command("balance-sheet")
@click.pass_context
def balance_sheet(ctx):
    """Balance sheet as of today."""
    statement = ReportService(ctx.obj["store"]).balance_sheet()

    click.echo("\nASSETS")
    click.echo(f"  {'Cash and Bank (Net Earnings)':<30} {format_money(statement.cash_and_bank):>14}")
    click.echo(f"  {'Livestock Value':<30} {format_money(statement.livestock_value):>14}")
    click.echo(f"  {'Fixed Assets':<30} {format_money(statement.fixed_asset_value):>14}")
    click.echo(f"  {'Total Assets':<30} {format_money(statement.total_assets):>14}")
    click.echo("\nLIABILITIES")
    for liability in statement.liabilities:
        click.echo(f"  {liability.name:<30} {format_money(liability.current_balance):>14}")
    click.echo(f"  {'Total Liabilities':<30} {format_money(statement.total_liabilities):>14}")
    click.echo("\nEQUITY")
    click.echo(f"  {OWNERS_EQUITY_LABEL:<30} {format_money(statement.total_equity):>14}")
    click.echo(
        f"  {'Total Liabilities & Equity':<30} "
        f"{format_money(statement.total_liabilities_and_equity):>14}"
    )


@report_group.command("cash-flow")
@click.pass_context
def cash_flow(ctx):
    """Direct-method cash flow statement."""
    statement = ReportService(ctx.obj["store"]).cash_flow()

    click.echo(f"\n{'Cash Inflow from Operations':<30} {format_money(statement.inflow):>14}")
    click.echo(f"{'Cash Outflow for Operations':<30} {'-' + format_money(statement.outflow):>14}")
    click.echo(f"{'Net Cash Flow':<30} {format_money(statement.net_cash_flow):>14}")


@report_group.command("owners-equity")
@click.pass_context
def owners_equity(ctx):
    """Statement of owner's equity."""
    statement = ReportService(ctx.obj["store"]).owners_equity()

    click.echo(f"\n{'Equity, Total (Assets - Liabilities)':<38} {format_money(statement.total_equity):>14}")
    click.echo(f"{'Current Period Net Income':<38} {format_money(statement.net_income):>14}")


@report_group.command("export")
@click.argument("kind", type=click.Choice(list(KIND_ALIASES)))
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory to write the CSV file to",
)
@click.option("--date", "as_of", help="Statement date (defaults to today)")
@click.pass_context
def export_statement(ctx, kind: str, output_dir: Path, as_of: str | None):
    """Export a statement as CSV, e.g. Balance_Sheet_2024-03-31.csv."""
    service = ReportService(ctx.obj["store"])
    parsed_date = parse_date_or_exit(ctx, as_of) if as_of else None

    filename, content = service.export_statement(KIND_ALIASES[kind], parsed_date)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text(content, encoding="utf-8")
    click.echo(f"Exported {path}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
