"""Shared pytest fixtures for farmbooks tests."""

import tempfile
import os
from decimal import Decimal
from typing import Optional

import pytest

from farmbooks.database.factories import create_sqlite_database
from farmbooks.database.record_store import RecordStore
from farmbooks.domain.asset import AssetService
from farmbooks.domain.category import CategoryService
from farmbooks.domain.inventory import InventoryService
from farmbooks.domain.liability import LiabilityService
from farmbooks.domain.livestock import LivestockService
from farmbooks.domain.reports import ReportService
from farmbooks.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store(temp_db):
    """A loaded record store backed by the temporary database."""
    record_store = RecordStore(temp_db)
    record_store.load()
    return record_store


@pytest.fixture
def reopen_store(temp_db):
    """Factory opening a fresh record store on the same database file."""

    def _reopen() -> RecordStore:
        fresh = create_sqlite_database(database_path=temp_db.database_path)
        record_store = RecordStore(fresh)
        record_store.load()
        return record_store

    return _reopen


@pytest.fixture
def category_service(store):
    return CategoryService(store)


@pytest.fixture
def transaction_service(store):
    return TransactionService(store)


@pytest.fixture
def livestock_service(store):
    return LivestockService(store)


@pytest.fixture
def asset_service(store):
    return AssetService(store)


@pytest.fixture
def liability_service(store):
    return LiabilityService(store)


@pytest.fixture
def inventory_service(store):
    return InventoryService(store)


@pytest.fixture
def report_service(store):
    return ReportService(store)


@pytest.fixture
def sample_transactions(transaction_service):
    """One 1000 income (Sales) and one 300 expense (Rent) in March 2024."""
    from datetime import date

    from farmbooks.domain.entities import TransactionType

    income_id = transaction_service.create_transaction(
        date=date(2024, 3, 5),
        description="Calves sold",
        amount=Decimal("1000"),
        transaction_type=TransactionType.INCOME,
        category_id="1",
    )
    expense_id = transaction_service.create_transaction(
        date=date(2024, 3, 9),
        description="Barn rent",
        amount=Decimal("300"),
        transaction_type=TransactionType.EXPENSE,
        category_id="3",
    )
    return income_id, expense_id


class FakeAdviceClient:
    """Advice client that returns canned replies and records its calls."""

    def __init__(self, reply: Optional[str] = "Reduce feed costs.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, prompt, system_instruction=None, temperature=0.6):
        self.calls.append(
            {"prompt": prompt, "system_instruction": system_instruction, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_client():
    return FakeAdviceClient()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_client():
    """Factory for fake advice clients with a given reply or error."""
    return FakeAdviceClient
