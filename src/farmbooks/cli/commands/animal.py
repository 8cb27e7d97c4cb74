"""Livestock commands."""

import click

from farmbooks.cli.error_handling import handle_domain_error
from farmbooks.cli.parsing import format_money, parse_amount_or_exit, parse_date_or_exit
from farmbooks.domain.entities import PopulationChange
from farmbooks.domain.errors import DomainError
from farmbooks.domain.livestock import LivestockService


def resolve_species_or_exit(ctx, service: LivestockService, species: str):
    """Resolve a species ID or exact name (ignoring case), exiting if unknown."""
    found = service.get_species(species)
    if found is None:
        wanted = species.strip().lower()
        found = next((s for s in service.list_species() if s.name.lower() == wanted), None)
    if found is None:
        click.echo(f"Error: Species '{species}' not found", err=True)
        ctx.exit(1)
    return found


@click.group()
def animal_group():
    """Manage livestock and population changes."""
    pass


@animal_group.command("add")
@click.argument("name")
@click.option("--value", "estimated_value", required=True, help="Estimated market value per head")
@click.option("--min-level", type=int, default=5, show_default=True, help="Sustainability alert level")
@click.option("--tag", default="", help="Herd tag (e.g., H-01)")
@click.option("--breed", default="", help="Breed")
@click.pass_context
def add_species(ctx, name: str, estimated_value: str, min_level: int, tag: str, breed: str):
    """Add an animal species. Its head count starts at zero."""
    service = LivestockService(ctx.obj["store"])
    value = parse_amount_or_exit(ctx, estimated_value, "value")

    try:
        species_id = service.add_species(
            name=name, estimated_value=value, min_sustainability_level=min_level, tag=tag, breed=breed
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added species '{name}' (ID: {species_id})")


@animal_group.command("list")
@click.pass_context
def list_species(ctx):
    """Show head counts, values and sustainability alerts."""
    service = LivestockService(ctx.obj["store"])

    species = service.list_species()
    if not species:
        click.echo("No species found. Use 'animal add' to start tracking livestock.")
        return

    click.echo(f"\n{'Name':<24} {'Tag':<8} {'Breed':<14} {'Head':>6} {'Value/Head':>12} {'Total':>14}")
    click.echo("-" * 84)
    for s in species:
        alert = "  SUSTAINABILITY ALERT" if s.is_below_sustainability else ""
        click.echo(
            f"{s.name:<24} {s.tag:<8} {s.breed:<14} {s.count:>6} "
            f"{format_money(s.estimated_value):>12} {format_money(s.market_value):>14}{alert}"
        )
    click.echo("-" * 84)
    click.echo(f"Total head: {service.total_head_count()}")
    click.echo(f"Total livestock value: {format_money(service.livestock_value())}")


@animal_group.command("update")
@click.argument("species")
@click.option("--name", help="New name")
@click.option("--tag", help="New tag")
@click.option("--breed", help="New breed")
@click.option("--value", "estimated_value", help="New estimated value per head")
@click.option("--min-level", type=int, help="New sustainability alert level")
@click.pass_context
def update_species(ctx, species: str, name, tag, breed, estimated_value, min_level):
    """Edit a species. The head count only changes through 'animal log'."""
    service = LivestockService(ctx.obj["store"])
    found = resolve_species_or_exit(ctx, service, species)
    value = parse_amount_or_exit(ctx, estimated_value, "value") if estimated_value else None

    try:
        updated = service.update_species(
            found.id,
            name=name,
            tag=tag,
            breed=breed,
            estimated_value=value,
            min_sustainability_level=min_level,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated species '{updated.name}'")


@animal_group.command("log")
@click.argument("species")
@click.option(
    "--type",
    "change",
    type=click.Choice([c.value for c in PopulationChange], case_sensitive=False),
    required=True,
    help="BOUGHT or BIRTH add head; SOLD or DEATH remove head",
)
@click.option("--quantity", type=click.IntRange(min=1), required=True, help="Number of animals")
@click.option("--date", "log_date", default="today", show_default=True, help="Event date")
@click.option("--note", default="", help="Note (e.g., 'Relocated to north field')")
@click.pass_context
def record_log(ctx, species: str, change: str, quantity: int, log_date: str, note: str):
    """Record a population change for a species (ID or name)."""
    service = LivestockService(ctx.obj["store"])
    found = resolve_species_or_exit(ctx, service, species)
    parsed_date = parse_date_or_exit(ctx, log_date)

    try:
        log = service.record_log(found.id, PopulationChange(change.upper()), quantity, parsed_date, note)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if log is None:
        click.echo(f"Error: Species '{species}' not found", err=True)
        ctx.exit(1)
    current = service.get_species(found.id)
    click.echo(f"Recorded {log.type.value} of {log.quantity} for '{found.name}'. Current head: {current.count}")


@animal_group.command("history")
@click.pass_context
def history(ctx):
    """Show population-change history, newest first."""
    service = LivestockService(ctx.obj["store"])

    entries = service.history()
    if not entries:
        click.echo("No population changes recorded.")
        return

    click.echo(f"\n{'Date':<12} {'Species':<28} {'Type':<7} {'Qty':>5} {'Value/Head':>12}  Note")
    click.echo("-" * 90)
    for entry in entries:
        log = entry.log
        sign = "+" if log.type.is_increase else "-"
        click.echo(
            f"{log.date.isoformat():<12} {entry.species_label:<28} {log.type.value:<7} "
            f"{sign + str(log.quantity):>5} {format_money(log.value_at_time):>12}  {log.note}"
        )


@animal_group.command("mortality")
@click.option("--species", "species_name", default="sheep", show_default=True, help="Name fragment for the species subset")
@click.pass_context
def mortality(ctx, species_name: str):
    """Show deaths recorded over the trailing year."""
    service = LivestockService(ctx.obj["store"])
    stats = service.mortality_stats(species_name=species_name)

    click.echo(f"Deaths since {stats.since.isoformat()}: {stats.total_recent_deaths}")
    click.echo(f"  of which '{stats.species_name}': {stats.species_deaths}")


@animal_group.command("alerts")
@click.pass_context
def alerts(ctx):
    """List species at or below their sustainability level."""
    service = LivestockService(ctx.obj["store"])

    low = service.species_alerts()
    if not low:
        click.echo("All species are above their sustainability levels.")
        return
    for s in low:
        click.echo(f"{s.name}: {s.count} head (minimum {s.min_sustainability_level})")


@animal_group.command("delete")
@click.argument("species")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_species(ctx, species: str, yes: bool):
    """Delete a species and all its history."""
    service = LivestockService(ctx.obj["store"])
    found = resolve_species_or_exit(ctx, service, species)

    if not yes and not click.confirm(f"Delete species '{found.name}' and all its history?"):
        click.echo("Deletion cancelled.")
        return

    try:
        removed = service.delete_species(found.id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted species '{found.name}' and {removed} log entr{'y' if removed == 1 else 'ies'}")


def register_commands(cli):
    """Register animal commands with main CLI."""
    cli.add_command(animal_group, name="animal")
