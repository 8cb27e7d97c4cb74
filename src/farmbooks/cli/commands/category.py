"""Category management commands."""

import click

from farmbooks.cli.error_handling import handle_domain_error
from farmbooks.domain.category import CategoryService
from farmbooks.domain.entities import TransactionType
from farmbooks.domain.errors import DomainError

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def category_group():
    """Manage income and expense categories."""
    pass


@category_group.command("list")
@click.option("--type", "category_type", type=TYPE_CHOICE, help="Only show INCOME or EXPENSE categories")
@click.pass_context
def list_categories(ctx, category_type: str | None):
    """List categories."""
    service = CategoryService(ctx.obj["store"])
    wanted = TransactionType(category_type.upper()) if category_type else None

    categories = service.list_categories(wanted)
    if not categories:
        click.echo("No categories found. Run 'category restore-defaults' to add the default set.")
        return

    click.echo(f"\n{'ID':<38} {'Name':<20} {'Type':<8} {'Color':<8} {'Used':>5}")
    click.echo("-" * 83)
    for cat in categories:
        click.echo(
            f"{cat.id:<38} {cat.name:<20} {cat.type.value:<8} {cat.color:<8} "
            f"{service.usage_count(cat.id):>5}"
        )


@category_group.command("create")
@click.argument("name")
@click.option("--type", "category_type", type=TYPE_CHOICE, default="EXPENSE", help="Category type (default: EXPENSE)")
@click.option("--color", help="Display color, e.g. '#10b981'")
@click.pass_context
def create_category(ctx, name: str, category_type: str, color: str | None):
    """Create a new category."""
    service = CategoryService(ctx.obj["store"])

    try:
        category_id = service.create_category(
            name=name, category_type=TransactionType(category_type.upper()), color=color
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {category_type.lower()} category '{name}' (ID: {category_id})")


@category_group.command("update")
@click.argument("category_id")
@click.option("--name", help="New name")
@click.option("--type", "category_type", type=TYPE_CHOICE, help="New type")
@click.option("--color", help="New display color")
@click.pass_context
def update_category(ctx, category_id: str, name: str | None, category_type: str | None, color: str | None):
    """Edit a category."""
    service = CategoryService(ctx.obj["store"])

    try:
        updated = service.rename_category(
            category_id,
            name=name,
            category_type=TransactionType(category_type.upper()) if category_type else None,
            color=color,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated category '{updated.name}' ({updated.type.value}, {updated.color})")


@category_group.command("delete")
@click.argument("category_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_category(ctx, category_id: str, yes: bool):
    """Delete a category.

    Transactions that use the category are kept but become uncategorized.
    """
    service = CategoryService(ctx.obj["store"])

    cat = service.get_category(category_id)
    if cat is None:
        click.echo(f"Error: Category {category_id} not found", err=True)
        ctx.exit(1)

    in_use = service.usage_count(category_id)
    if in_use and not yes:
        if not click.confirm(
            f"Category '{cat.name}' is used in {in_use} existing "
            f"transaction{'s' if in_use != 1 else ''}. Deleting it will leave those "
            "transactions uncategorized. Continue?"
        ):
            click.echo("Deletion cancelled.")
            return

    try:
        service.delete_category(category_id, force=True)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted category '{cat.name}'")


@category_group.command("restore-defaults")
@click.pass_context
def restore_defaults(ctx):
    """Add any missing default categories."""
    service = CategoryService(ctx.obj["store"])
    added = service.restore_defaults()
    if added == 0:
        click.echo("All default categories already exist.")
    else:
        click.echo(f"Added {added} default categor{'y' if added == 1 else 'ies'}.")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
