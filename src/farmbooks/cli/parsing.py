"""CLI helpers for parsing dates and amounts."""

from datetime import date
from decimal import Decimal

import click

from farmbooks.utils.amount_parser import parse_amount
from farmbooks.utils.date_parser import parse_date


def parse_date_or_exit(ctx: click.Context, value: str, label: str = "date") -> date:
    """Parse a date option, exiting with an error message on failure."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str, label: str = "amount") -> Decimal:
    """Parse an amount option, exiting with an error message on failure."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def format_money(value: Decimal) -> str:
    return f"${value:,.2f}"
