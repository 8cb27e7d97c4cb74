"""Inventory commands."""

import click

from farmbooks.cli.error_handling import handle_domain_error
from farmbooks.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from farmbooks.domain.entities import MovementType
from farmbooks.domain.errors import DomainError
from farmbooks.domain.inventory import InventoryService


@click.group()
def inventory_group():
    """Manage feed, seed and other stocked supplies."""
    pass


@inventory_group.command("add")
@click.argument("name")
@click.option("--unit-cost", required=True, help="Cost per unit")
@click.option("--min-stock", type=int, default=5, show_default=True, help="Low-stock level")
@click.option("--sku", default="", help="Stock-keeping code")
@click.option("--description", default="", help="Description")
@click.pass_context
def add_item(ctx, name: str, unit_cost: str, min_stock: int, sku: str, description: str):
    """Add an inventory item. Stock starts at zero."""
    service = InventoryService(ctx.obj["store"])
    cost = parse_amount_or_exit(ctx, unit_cost, "unit cost")

    try:
        item_id = service.add_item(
            name=name, unit_cost=cost, min_stock_level=min_stock, sku=sku, description=description
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added item '{name}' (ID: {item_id})")


@inventory_group.command("list")
@click.pass_context
def list_items(ctx):
    """Show stock levels and value."""
    service = InventoryService(ctx.obj["store"])

    items = service.list_items()
    if not items:
        click.echo("No inventory items found.")
        return

    click.echo(f"\n{'Name':<26} {'SKU':<10} {'Stock':>6} {'Unit Cost':>12} {'Value':>14}  ID")
    click.echo("-" * 110)
    for item in items:
        low = "  LOW STOCK" if item.is_low_stock else ""
        click.echo(
            f"{item.name:<26} {item.sku:<10} {item.quantity:>6} {format_money(item.unit_cost):>12} "
            f"{format_money(item.stock_value):>14}  {item.id}{low}"
        )
    click.echo("-" * 110)
    click.echo(f"Inventory value: {format_money(service.inventory_value())}")
    click.echo(f"Low-stock items: {len(service.low_stock_items())}")


@inventory_group.command("move")
@click.argument("item_id")
@click.option(
    "--type",
    "movement_type",
    type=click.Choice([m.value for m in MovementType], case_sensitive=False),
    required=True,
    help="IN adds stock, OUT removes it",
)
@click.option("--quantity", type=click.IntRange(min=1), required=True)
@click.option("--date", "movement_date", default="today", show_default=True)
@click.option("--note", default="")
@click.pass_context
def record_movement(ctx, item_id: str, movement_type: str, quantity: int, movement_date: str, note: str):
    """Record a stock movement."""
    service = InventoryService(ctx.obj["store"])
    parsed_date = parse_date_or_exit(ctx, movement_date)

    try:
        movement = service.record_movement(
            item_id, MovementType(movement_type.upper()), quantity, parsed_date, note
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if movement is None:
        click.echo(f"Error: Inventory item {item_id} not found", err=True)
        ctx.exit(1)
    item = service.get_item(item_id)
    click.echo(f"Recorded stock {movement.type.value} of {quantity} for '{item.name}'. On hand: {item.quantity}")


@inventory_group.command("history")
@click.pass_context
def history(ctx):
    """Show stock movements, newest first."""
    service = InventoryService(ctx.obj["store"])

    entries = service.history()
    if not entries:
        click.echo("No stock movements recorded.")
        return

    for entry in entries:
        m = entry.movement
        sign = "+" if m.type == MovementType.IN else "-"
        click.echo(
            f"{m.date.isoformat():<12} {entry.item_label:<26} {sign + str(m.quantity):>6} "
            f"{format_money(m.unit_cost_at_time):>12}  {m.note}"
        )


@inventory_group.command("delete")
@click.argument("item_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_item(ctx, item_id: str, yes: bool):
    """Delete an item and its movement history."""
    service = InventoryService(ctx.obj["store"])

    item = service.get_item(item_id)
    if item is None:
        click.echo(f"Error: Inventory item {item_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Delete item '{item.name}' and all its movements?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_item(item_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted item '{item.name}'")


def register_commands(cli):
    """Register inventory commands with main CLI."""
    cli.add_command(inventory_group, name="inventory")
