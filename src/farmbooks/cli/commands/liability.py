"""Liability commands."""

import click

from farmbooks.cli.error_handling import handle_domain_error
from farmbooks.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from farmbooks.domain.entities import LiabilityCategory
from farmbooks.domain.errors import DomainError
from farmbooks.domain.liability import LiabilityService


@click.group()
def liability_group():
    """Manage loans, mortgages and other liabilities."""
    pass


@liability_group.command("add")
@click.argument("name")
@click.option(
    "--category",
    type=click.Choice([c.value for c in LiabilityCategory], case_sensitive=False),
    default="LOAN",
    show_default=True,
)
@click.option("--original-amount", required=True, help="Amount originally borrowed or owed")
@click.option("--balance", help="Current balance (defaults to the original amount)")
@click.option("--rate", default="0", show_default=True, help="Annual interest rate in percent")
@click.option("--due-date", help="Due date")
@click.option("--description", default="", help="Notes")
@click.pass_context
def add_liability(ctx, name, category, original_amount, balance, rate, due_date, description):
    """Add a liability."""
    service = LiabilityService(ctx.obj["store"])
    original = parse_amount_or_exit(ctx, original_amount, "original amount")
    current = parse_amount_or_exit(ctx, balance, "balance") if balance else original
    interest = parse_amount_or_exit(ctx, rate, "interest rate")
    parsed_due = parse_date_or_exit(ctx, due_date, "due date") if due_date else None

    try:
        liability_id = service.add_liability(
            name=name,
            category=LiabilityCategory(category.upper()),
            original_amount=original,
            current_balance=current,
            interest_rate=interest,
            due_date=parsed_due,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added liability '{name}' (ID: {liability_id})")


@liability_group.command("list")
@click.pass_context
def list_liabilities(ctx):
    """List liabilities with their current balances."""
    service = LiabilityService(ctx.obj["store"])

    liabilities = service.list_liabilities()
    if not liabilities:
        click.echo("No liabilities recorded.")
        return

    click.echo(f"\n{'Name':<26} {'Category':<17} {'Original':>14} {'Balance':>14} {'Rate':>7} {'Due':<11}  ID")
    click.echo("-" * 130)
    for l in liabilities:
        due = l.due_date.isoformat() if l.due_date else "-"
        click.echo(
            f"{l.name:<26} {l.category.value:<17} {format_money(l.original_amount):>14} "
            f"{format_money(l.current_balance):>14} {l.interest_rate:>6}% {due:<11}  {l.id}"
        )
    click.echo("-" * 130)
    click.echo(f"Total liabilities: {format_money(service.total_liabilities())}")


@liability_group.command("delete")
@click.argument("liability_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_liability(ctx, liability_id: str, yes: bool):
    """Delete a liability record."""
    service = LiabilityService(ctx.obj["store"])

    liability = service.get_liability(liability_id)
    if liability is None:
        click.echo(f"Error: Liability {liability_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Delete liability record '{liability.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_liability(liability_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted liability '{liability.name}'")


def register_commands(cli):
    """Register liability commands with main CLI."""
    cli.add_command(liability_group, name="liability")
