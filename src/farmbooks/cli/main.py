"""Main CLI entry point."""

import click

from farmbooks.config.logging import configure_logging
from farmbooks.database.factories import create_sqlite_database
from farmbooks.database.record_store import RecordStore

# Import and register all commands at module level
from farmbooks.cli.commands import (
    advice,
    animal,
    asset,
    category,
    dashboard,
    inventory,
    liability,
    report,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FARMBOOKS_DB_PATH environment variable)",
    envvar="FARMBOOKS_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="FARMBOOKS_LOG_LEVEL",
    help="Log level for diagnostics written to stderr",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default="console",
    envvar="FARMBOOKS_LOG_FORMAT",
    help="Log output format",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str, log_format: str):
    """Farmbooks - Farm bookkeeping.

    Track income and expenses, livestock, fixed assets, liabilities and
    inventory, and derive profit & loss, balance sheet and cash flow
    statements from them.
    """
    ctx.ensure_object(dict)
    configure_logging(level=log_level, format=log_format.lower())

    # Load the record store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        store = RecordStore(db)
        store.load()
        ctx.obj["db"] = db
        ctx.obj["store"] = store


# Register all commands
category.register_commands(cli)
transaction.register_commands(cli)
animal.register_commands(cli)
asset.register_commands(cli)
liability.register_commands(cli)
inventory.register_commands(cli)
report.register_commands(cli)
dashboard.register_commands(cli)
advice.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
