"""Advice and category suggestion commands."""

from typing import Optional

import click
import structlog

from farmbooks.config.settings import Settings
from farmbooks.domain.advice import AdviceClient, AdvisorService
from farmbooks.domain.entities import TransactionType

logger = structlog.get_logger(__name__)


def build_advice_client(ctx: click.Context) -> Optional[AdviceClient]:
    """Client from the context, or a Gemini client when an API key is set."""
    if ctx.obj.get("advice_client") is not None:
        return ctx.obj["advice_client"]

    settings = Settings.from_env()
    if not settings.gemini_api_key:
        return None

    from farmbooks.clients.gemini import GeminiAdviceClient

    try:
        return GeminiAdviceClient(settings=settings)
    except Exception:
        logger.exception("could not create advice client")
        return None


@click.command("advice")
@click.pass_context
def advice(ctx):
    """Strategic commentary on the books from a text-generation model."""
    service = AdvisorService(ctx.obj["store"], build_advice_client(ctx))

    text = service.financial_advice()
    if text is None:
        click.echo("No advice available.")
        return
    click.echo(text)


@click.command("suggest-category")
@click.argument("description")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="Only accept a category of this type",
)
@click.pass_context
def suggest_category(ctx, description: str, txn_type: Optional[str]):
    """Suggest an existing category for a transaction description."""
    service = AdvisorService(ctx.obj["store"], build_advice_client(ctx))
    fixed_type = TransactionType(txn_type.upper()) if txn_type else None

    category = service.suggest_category(description, fixed_type)
    if category is None:
        click.echo("No suggestion.")
        return
    click.echo(f"{category.name} ({category.type.value.lower()}, ID: {category.id})")


def register_commands(cli):
    """Register advice commands with main CLI."""
    cli.add_command(advice)
    cli.add_command(suggest_category)
