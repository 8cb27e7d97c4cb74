"""Transaction commands."""

import click

from farmbooks.cli.error_handling import handle_domain_error
from farmbooks.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from farmbooks.domain.category import CategoryService
from farmbooks.domain.entities import TransactionType
from farmbooks.domain.errors import DomainError
from farmbooks.domain.transaction import TransactionService

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def transaction_group():
    """Record and review income and expenses."""
    pass


@transaction_group.command("add")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, required=True, help="INCOME or EXPENSE")
@click.option("--amount", required=True, help="Amount, without sign (e.g., 1250.00)")
@click.option("--description", required=True, help="What the money was for")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--date",
    "txn_date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_transaction(
    ctx,
    transaction_type: str,
    amount: str,
    description: str,
    category: str,
    txn_date: str,
):
    """Add an income or expense transaction.

    Examples:
        farmbooks transaction add --type INCOME --amount 1000 --description "Calves" --category Sales
        farmbooks transaction add --type EXPENSE --amount 300 --description "Barn" --category Rent
    """
    store = ctx.obj["store"]
    service = TransactionService(store)
    category_service = CategoryService(store)

    txn_type = TransactionType(transaction_type.upper())
    parsed_date = parse_date_or_exit(ctx, txn_date)
    parsed_amount = parse_amount_or_exit(ctx, amount)

    cat = category_service.find_by_name(category, txn_type) or category_service.get_category(category)
    if cat is None:
        click.echo(f"Error: Category '{category}' not found", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_transaction(
            date=parsed_date,
            description=description,
            amount=parsed_amount,
            transaction_type=txn_type,
            category_id=cat.id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Type: {txn_type.value}")
    click.echo(f"  Amount: {format_money(parsed_amount)}")
    click.echo(f"  Description: {description}")
    click.echo(f"  Category: {cat.name}")


@transaction_group.command("list")
@click.option("--type", "transaction_type", type=TYPE_CHOICE, help="Only show INCOME or EXPENSE")
@click.pass_context
def list_transactions(ctx, transaction_type: str | None):
    """List transactions, newest first."""
    service = TransactionService(ctx.obj["store"])
    wanted = TransactionType(transaction_type.upper()) if transaction_type else None

    transactions = service.list_transactions(wanted)
    if not transactions:
        click.echo("No transactions found. Add one to get started.")
        return

    click.echo(f"\n{'Date':<12} {'Description':<30} {'Category':<18} {'Amount':>14}  ID")
    click.echo("-" * 115)
    for txn in transactions:
        sign = "+" if txn.type == TransactionType.INCOME else "-"
        description = txn.description[:30]
        click.echo(
            f"{txn.date.isoformat():<12} {description:<30} {service.category_label(txn):<18} "
            f"{sign + format_money(txn.amount):>14}  {txn.id}"
        )


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool):
    """Delete a transaction."""
    service = TransactionService(ctx.obj["store"])

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction '{txn.description}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
