"""Tests for the animal population ledger."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from farmbooks.domain.entities import PopulationChange
from farmbooks.domain.errors import NotFoundError, ValidationError
from farmbooks.domain.livestock import ARCHIVED_SPECIES, adjusted_count, below_sustainability


@pytest.fixture
def sheep_id(livestock_service):
    return livestock_service.add_species("Merino Sheep", Decimal("150"), 10, tag="S-1", breed="Merino")


def test_new_species_starts_empty(livestock_service, sheep_id):
    """Test new species starts empty."""
    species = livestock_service.get_species(sheep_id)
    assert species.count == 0
    assert species.market_value == Decimal("0")


def test_adjusted_count():
    """Test adjusted count."""
    assert adjusted_count(3, PopulationChange.BOUGHT, 2) == 5
    assert adjusted_count(3, PopulationChange.BIRTH, 1) == 4
    assert adjusted_count(3, PopulationChange.SOLD, 2) == 1
    assert adjusted_count(3, PopulationChange.DEATH, 5) == 0


def test_record_log_adjusts_count(livestock_service, sheep_id, reopen_store):
    """Test record log adjusts count."""
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 12, date(2024, 1, 5))
    log = livestock_service.record_log(sheep_id, PopulationChange.SOLD, 2, date(2024, 2, 5), "Market")

    assert log.value_at_time == Decimal("150")
    assert log.note == "Market"
    assert livestock_service.get_species(sheep_id).count == 10

    reopened = reopen_store()
    assert reopened.animal_species[0].count == 10
    assert len(reopened.animal_logs) == 2


def test_count_never_negative(livestock_service, sheep_id):
    """Test count never negative."""
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 3, date(2024, 1, 5))
    livestock_service.record_log(sheep_id, PopulationChange.DEATH, 5, date(2024, 1, 6))

    assert livestock_service.get_species(sheep_id).count == 0


def test_log_snapshots_value(livestock_service, sheep_id):
    """Test log snapshots value."""
    first = livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 1, date(2024, 1, 5))
    livestock_service.update_species(sheep_id, estimated_value=Decimal("175"))
    second = livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 1, date(2024, 1, 6))

    assert first.value_at_time == Decimal("150")
    assert second.value_at_time == Decimal("175")


def test_record_log_rejects_non_positive_quantity(livestock_service, sheep_id):
    """Test record log rejects non positive quantity."""
    with pytest.raises(ValidationError):
        livestock_service.record_log(sheep_id, PopulationChange.BIRTH, 0, date(2024, 1, 5))


def test_record_log_unknown_species(livestock_service, store):
    """Test record log unknown species."""
    assert livestock_service.record_log("ghost", PopulationChange.BIRTH, 1, date(2024, 1, 5)) is None
    assert store.animal_logs == []


def test_update_keeps_count(livestock_service, sheep_id):
    """Test update keeps count."""
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 7, date(2024, 1, 5))

    updated = livestock_service.update_species(sheep_id, name="Dorper Sheep", min_sustainability_level=2)

    assert updated.count == 7
    assert updated.name == "Dorper Sheep"
    assert updated.tag == "S-1"


def test_delete_species_cascades(livestock_service, sheep_id, store):
    """Test delete species cascades."""
    goat_id = livestock_service.add_species("Goat", Decimal("80"), 2)
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 5, date(2024, 1, 5))
    livestock_service.record_log(sheep_id, PopulationChange.DEATH, 1, date(2024, 1, 9))
    livestock_service.record_log(goat_id, PopulationChange.BIRTH, 2, date(2024, 1, 9))

    assert livestock_service.delete_species(sheep_id) == 2
    assert [log.species_id for log in store.animal_logs] == [goat_id]

    with pytest.raises(NotFoundError):
        livestock_service.delete_species(sheep_id)


def test_species_alerts(livestock_service, sheep_id):
    """Test species alerts."""
    goat_id = livestock_service.add_species("Goat", Decimal("80"), 2)
    livestock_service.record_log(goat_id, PopulationChange.BOUGHT, 6, date(2024, 1, 5))
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 10, date(2024, 1, 5))

    # A count equal to the minimum level counts as an alert
    assert [s.id for s in livestock_service.species_alerts()] == [sheep_id]
    assert below_sustainability(livestock_service.get_species(sheep_id))
    assert not below_sustainability(livestock_service.get_species(goat_id))


def test_livestock_totals(livestock_service, sheep_id):
    """Test livestock totals."""
    goat_id = livestock_service.add_species("Goat", Decimal("80"), 2)
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 4, date(2024, 1, 5))
    livestock_service.record_log(goat_id, PopulationChange.BOUGHT, 5, date(2024, 1, 5))

    assert livestock_service.total_head_count() == 9
    assert livestock_service.livestock_value() == Decimal("1000")


def test_mortality_stats(livestock_service, sheep_id):
    """Test mortality stats."""
    now = date(2024, 6, 30)
    goat_id = livestock_service.add_species("Goat", Decimal("80"), 2)
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 20, now - timedelta(days=500))
    livestock_service.record_log(sheep_id, PopulationChange.DEATH, 2, now - timedelta(days=10))
    livestock_service.record_log(sheep_id, PopulationChange.DEATH, 5, now - timedelta(days=400))
    livestock_service.record_log(goat_id, PopulationChange.BIRTH, 3, now - timedelta(days=20))
    livestock_service.record_log(goat_id, PopulationChange.DEATH, 1, now - timedelta(days=20))

    stats = livestock_service.mortality_stats(now=now)

    assert stats.since == date(2023, 6, 30)
    assert stats.total_recent_deaths == 3
    assert stats.species_deaths == 2


def test_history_labels(livestock_service, sheep_id, store):
    """Test history labels."""
    livestock_service.record_log(sheep_id, PopulationChange.BOUGHT, 5, date(2024, 1, 5))
    livestock_service.record_log(sheep_id, PopulationChange.BIRTH, 1, date(2024, 3, 5))

    history = livestock_service.history()
    assert [entry.log.date for entry in history] == [date(2024, 3, 5), date(2024, 1, 5)]
    assert history[0].species_label == "Merino Sheep (S-1)"

    # A log whose species vanished from storage is shown as archived
    store.animal_species = []
    assert livestock_service.history()[0].species_label == ARCHIVED_SPECIES
