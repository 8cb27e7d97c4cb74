"""Animal population ledger.

Each species carries a cached head count that only changes when a
population-change log is recorded. Recording a log appends the event and
adjusts the count in the same step, and both collections are persisted
together.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

import structlog
from dateutil.relativedelta import relativedelta

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import errors
from farmbooks.domain.entities import (
    AnimalLog,
    AnimalSpecies,
    LogHistoryEntry,
    MortalityStats,
    PopulationChange,
)
from farmbooks.domain.errors import NotFoundError, ValidationError
from farmbooks.utils.ids import generate_id

logger = structlog.get_logger(__name__)

ARCHIVED_SPECIES = "Archived Species"


def adjusted_count(count: int, change: PopulationChange, quantity: int) -> int:
    """Apply one population change to a head count, never going below zero."""
    delta = quantity if change.is_increase else -quantity
    return max(0, count + delta)


def below_sustainability(species: AnimalSpecies) -> bool:
    """True when the head count is at or below the sustainability level."""
    return species.is_below_sustainability


class LivestockService:
    """Service for animal species and their population-change logs."""

    def __init__(self, store: RecordStore):
        """Initialize livestock service.

        Args:
            store: Record store holding the species and log collections
        """
        self.store = store

    def add_species(
        self,
        name: str,
        estimated_value: Decimal,
        min_sustainability_level: int,
        tag: str = "",
        breed: str = "",
    ) -> str:
        """Add a species with a head count of zero.

        Args:
            name: Species name (e.g., "Holstein Cow")
            estimated_value: Market value per head
            min_sustainability_level: Head count at or below which an alert is raised
            tag: Optional herd tag
            breed: Optional breed

        Returns:
            Species ID

        Raises:
            ValidationError: If the name is empty or the value is negative
        """
        self._validate(name, estimated_value)
        species = AnimalSpecies(
            id=generate_id(),
            name=name.strip(),
            tag=tag,
            breed=breed,
            count=0,
            estimated_value=estimated_value,
            min_sustainability_level=min_sustainability_level,
        )
        self.store.animal_species = [*self.store.animal_species, species]
        self.store.persist("animal_species")
        logger.info("species added", species_id=species.id, name=species.name)
        return species.id

    def _validate(self, name: str, estimated_value: Decimal) -> None:
        if not name.strip():
            raise ValidationError("Species name must not be empty")
        if estimated_value < 0:
            raise ValidationError(errors.negative_amount("Estimated value", estimated_value))

    def get_species(self, species_id: str) -> Optional[AnimalSpecies]:
        """Get species by ID, or None if not found."""
        return next((s for s in self.store.animal_species if s.id == species_id), None)

    def list_species(self) -> list[AnimalSpecies]:
        """List all species in creation order."""
        return list(self.store.animal_species)

    def update_species(
        self,
        species_id: str,
        name: Optional[str] = None,
        tag: Optional[str] = None,
        breed: Optional[str] = None,
        estimated_value: Optional[Decimal] = None,
        min_sustainability_level: Optional[int] = None,
    ) -> AnimalSpecies:
        """Replace a species' descriptive fields.

        The head count is kept; it can only change through recorded logs.

        Raises:
            NotFoundError: If the species doesn't exist
            ValidationError: If the new name is empty or the value negative
        """
        current = self.get_species(species_id)
        if current is None:
            raise NotFoundError(errors.species_not_found(species_id))

        updated = replace(
            current,
            name=name.strip() if name is not None else current.name,
            tag=tag if tag is not None else current.tag,
            breed=breed if breed is not None else current.breed,
            estimated_value=(
                estimated_value if estimated_value is not None else current.estimated_value
            ),
            min_sustainability_level=(
                min_sustainability_level
                if min_sustainability_level is not None
                else current.min_sustainability_level
            ),
        )
        self._validate(updated.name, updated.estimated_value)

        self.store.animal_species = [
            updated if s.id == species_id else s for s in self.store.animal_species
        ]
        self.store.persist("animal_species")
        logger.info("species updated", species_id=species_id)
        return updated

    def record_log(
        self,
        species_id: str,
        change: PopulationChange,
        quantity: int,
        log_date: date,
        note: str = "",
    ) -> Optional[AnimalLog]:
        """Record a population change and adjust the species head count.

        The log snapshots the species' current estimated value. BOUGHT and
        BIRTH add the quantity; SOLD and DEATH subtract it, flooring the count
        at zero.

        Args:
            species_id: Species the event belongs to
            change: Kind of event
            quantity: Number of animals, at least 1
            log_date: When it happened
            note: Free-text note

        Returns:
            The recorded log, or None if the species doesn't exist

        Raises:
            ValidationError: If quantity is not positive
        """
        if quantity <= 0:
            raise ValidationError(errors.non_positive_quantity(quantity))

        species = self.get_species(species_id)
        if species is None:
            logger.warning("log dropped for unknown species", species_id=species_id)
            return None

        log = AnimalLog(
            id=generate_id(),
            species_id=species_id,
            date=log_date,
            type=change,
            quantity=quantity,
            note=note,
            value_at_time=species.estimated_value,
        )
        updated = replace(species, count=adjusted_count(species.count, change, quantity))

        self.store.animal_logs = [*self.store.animal_logs, log]
        self.store.animal_species = [
            updated if s.id == species_id else s for s in self.store.animal_species
        ]
        self.store.persist("animal_logs", "animal_species")
        logger.info(
            "population change recorded",
            species_id=species_id,
            change=change.value,
            quantity=quantity,
            count=updated.count,
        )
        return log

    def delete_species(self, species_id: str) -> int:
        """Delete a species and its entire log history.

        Returns:
            Number of logs removed

        Raises:
            NotFoundError: If the species doesn't exist
        """
        if self.get_species(species_id) is None:
            raise NotFoundError(errors.species_not_found(species_id))

        remaining_logs = [log for log in self.store.animal_logs if log.species_id != species_id]
        removed = len(self.store.animal_logs) - len(remaining_logs)

        self.store.animal_species = [s for s in self.store.animal_species if s.id != species_id]
        self.store.animal_logs = remaining_logs
        self.store.persist("animal_species", "animal_logs")
        logger.info("species deleted", species_id=species_id, logs_removed=removed)
        return removed

    def species_alerts(self) -> list[AnimalSpecies]:
        """Species whose head count is at or below their sustainability level."""
        return [s for s in self.store.animal_species if below_sustainability(s)]

    def livestock_value(self) -> Decimal:
        """Market value of all livestock (count x estimated value per species)."""
        return sum((s.market_value for s in self.store.animal_species), Decimal("0"))

    def total_head_count(self) -> int:
        """Number of animals across all species."""
        return sum(s.count for s in self.store.animal_species)

    def mortality_stats(
        self, now: Optional[date] = None, species_name: str = "sheep"
    ) -> MortalityStats:
        """Deaths recorded within the trailing year.

        Computed from the DEATH logs alone, independent of the cached counts.

        Args:
            now: Reference date (defaults to today)
            species_name: Substring selecting the species subset, ignoring case

        Returns:
            MortalityStats with the overall and species-subset totals
        """
        now = now or date.today()
        since = now - relativedelta(years=1)

        recent_deaths = [
            log
            for log in self.store.animal_logs
            if log.type == PopulationChange.DEATH and log.date >= since
        ]
        needle = species_name.lower()
        subset_ids = {s.id for s in self.store.animal_species if needle in s.name.lower()}

        return MortalityStats(
            since=since,
            total_recent_deaths=sum(log.quantity for log in recent_deaths),
            species_name=species_name,
            species_deaths=sum(
                log.quantity for log in recent_deaths if log.species_id in subset_ids
            ),
        )

    def species_label(self, species_id: str) -> str:
        """Display label for a species, or "Archived Species" if it is gone.

        Args:
            species_id: Species ID

        Returns:
            Species name, with its tag in parentheses when it has one
        """
        species = self.get_species(species_id)
        if species is None:
            return ARCHIVED_SPECIES
        return f"{species.name} ({species.tag})" if species.tag else species.name

    def history(self) -> list[LogHistoryEntry]:
        """All logs, newest first, labelled with their species."""
        logs = sorted(self.store.animal_logs, key=lambda log: log.date, reverse=True)
        return [LogHistoryEntry(log=log, species_label=self.species_label(log.species_id)) for log in logs]
