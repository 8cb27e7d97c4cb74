"""Fixed asset commands."""

import click

from farmbooks.cli.error_handling import handle_domain_error
from farmbooks.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from farmbooks.domain.asset import AssetService
from farmbooks.domain.entities import AssetCategory, PersistedAsset
from farmbooks.domain.errors import DomainError

CATEGORY_CHOICE = click.Choice(
    [c.value for c in AssetCategory if c != AssetCategory.LIVESTOCK], case_sensitive=False
)


@click.group()
def asset_group():
    """Manage fixed assets."""
    pass


@asset_group.command("add")
@click.argument("name")
@click.option("--category", type=CATEGORY_CHOICE, default="EQUIPMENT", show_default=True)
@click.option("--purchase-date", default="today", show_default=True, help="Purchase date")
@click.option("--purchase-price", required=True, help="Price paid")
@click.option("--current-value", help="Current value (defaults to the purchase price)")
@click.option("--description", default="", help="Condition, location, or serial numbers")
@click.pass_context
def add_asset(ctx, name, category, purchase_date, purchase_price, current_value, description):
    """Add a fixed asset."""
    service = AssetService(ctx.obj["store"])
    parsed_date = parse_date_or_exit(ctx, purchase_date, "purchase date")
    price = parse_amount_or_exit(ctx, purchase_price, "purchase price")
    value = parse_amount_or_exit(ctx, current_value, "current value") if current_value else price

    try:
        asset_id = service.add_asset(
            name=name,
            category=AssetCategory(category.upper()),
            purchase_date=parsed_date,
            purchase_price=price,
            current_value=value,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added asset '{name}' (ID: {asset_id})")


@asset_group.command("list")
@click.pass_context
def list_assets(ctx):
    """Show the asset ledger, including livestock, highest value first."""
    service = AssetService(ctx.obj["store"])

    entries = service.ledger()
    if not entries:
        click.echo("No assets recorded.")
        return

    click.echo(f"\n{'Name':<30} {'Category':<12} {'Purchased':<11} {'Price':>14} {'Value':>14}  ID")
    click.echo("-" * 120)
    for entry in entries:
        purchased = entry.purchase_date.isoformat() if entry.purchase_date else "-"
        entry_id = entry.id if isinstance(entry, PersistedAsset) else "(animal ledger)"
        click.echo(
            f"{entry.name:<30} {entry.category.value:<12} {purchased:<11} "
            f"{format_money(entry.purchase_price):>14} {format_money(entry.current_value):>14}  {entry_id}"
        )

    stats = service.asset_stats()
    click.echo("-" * 120)
    click.echo(f"Total value: {format_money(stats.total_value)} ({stats.asset_count} assets)")
    click.echo(f"  Fixed assets: {format_money(stats.fixed_value)}")
    click.echo(f"  Livestock: {format_money(stats.livestock_value)}")
    click.echo(f"  Accumulated depreciation: {format_money(stats.total_depreciation)}")


@asset_group.command("delete")
@click.argument("asset_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_asset(ctx, asset_id: str, yes: bool):
    """Delete an asset record. Livestock rows are managed under 'animal'."""
    service = AssetService(ctx.obj["store"])

    asset = service.get_asset(asset_id)
    if asset is None:
        click.echo(f"Error: Asset {asset_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Delete asset record '{asset.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_entry(PersistedAsset(asset))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted asset '{asset.name}'")


def register_commands(cli):
    """Register asset commands with main CLI."""
    cli.add_command(asset_group, name="asset")
