"""Dashboard command."""

import click

from farmbooks.cli.parsing import format_money
from farmbooks.domain import summary
from farmbooks.domain.inventory import InventoryService
from farmbooks.domain.livestock import LivestockService


@click.command()
@click.option("--months", type=int, default=6, show_default=True, help="Months of history to show")
@click.pass_context
def dashboard(ctx, months: int):
    """Overview of income, expenses, livestock and stock alerts."""
    store = ctx.obj["store"]
    transactions = store.transactions

    totals = summary.totals(transactions)
    click.echo(f"\nTotal income:   {format_money(totals.income):>14}")
    click.echo(f"Total expenses: {format_money(totals.expenses):>14}")
    click.echo(f"Net income:     {format_money(totals.net_income):>14}")

    series = summary.recent_trends(transactions, months)
    if series:
        click.echo(f"\n{'Month':<9} {'Income':>14} {'Expense':>14}")
        for row in series:
            click.echo(f"{row.month:<9} {format_money(row.income):>14} {format_money(row.expense):>14}")

    breakdown = summary.expense_breakdown_by_name(transactions, store.categories)
    if breakdown:
        click.echo("\nExpenses by category")
        for name, amount in sorted(breakdown.items(), key=lambda item: item[1], reverse=True):
            click.echo(f"  {name:<24} {format_money(amount):>14}")

    livestock = LivestockService(store)
    alerts = livestock.species_alerts()
    click.echo(f"\nLivestock: {livestock.total_head_count()} head, {format_money(livestock.livestock_value())}")
    for species in alerts:
        click.echo(
            f"  SUSTAINABILITY ALERT: {species.name} at {species.count} "
            f"(minimum {species.min_sustainability_level})"
        )

    low_stock = InventoryService(store).low_stock_items()
    for item in low_stock:
        click.echo(f"  LOW STOCK: {item.name} ({item.quantity} on hand)")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
