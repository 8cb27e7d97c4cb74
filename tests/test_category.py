"""Tests for category service."""

from datetime import date
from decimal import Decimal

import pytest

from farmbooks.domain.defaults import COLORS
from farmbooks.domain.entities import TransactionType
from farmbooks.domain.errors import DependencyError, NotFoundError, ValidationError


def test_create_category(category_service, reopen_store):
    """Test create category."""
    category_id = category_service.create_category("Feed", TransactionType.EXPENSE)

    category = category_service.get_category(category_id)
    assert category.name == "Feed"
    assert category.type == TransactionType.EXPENSE
    assert category.color in COLORS
    assert any(c.id == category_id for c in reopen_store().categories)


def test_create_category_empty_name(category_service):
    """Test create category empty name."""
    with pytest.raises(ValidationError):
        category_service.create_category("   ", TransactionType.INCOME)


def test_find_by_name_ignores_case(category_service):
    """Test find by name ignores case."""
    assert category_service.find_by_name("sales").id == "1"
    assert category_service.find_by_name("sales", TransactionType.EXPENSE) is None


def test_list_categories_by_type(category_service):
    """Test list categories by type."""
    income = category_service.list_categories(TransactionType.INCOME)
    assert [c.name for c in income] == ["Sales", "Consulting"]
    assert len(category_service.list_categories()) == 7


def test_rename_category(category_service):
    """Test rename category."""
    updated = category_service.rename_category("6", name="Advertising", color="#000000")

    assert updated.name == "Advertising"
    assert updated.type == TransactionType.EXPENSE
    assert category_service.get_category("6").color == "#000000"


def test_update_missing_category(category_service):
    """Test update missing category."""
    with pytest.raises(NotFoundError):
        category_service.rename_category("missing", name="X")


def test_delete_unused_category(category_service):
    """Test delete unused category."""
    category_service.delete_category("6")
    assert category_service.get_category("6") is None


def test_delete_category_in_use_requires_force(category_service, transaction_service):
    """Test delete category in use requires force."""
    txn_id = transaction_service.create_transaction(
        date=date(2024, 1, 10),
        description="Power bill",
        amount=Decimal("85"),
        transaction_type=TransactionType.EXPENSE,
        category_id="4",
    )

    with pytest.raises(DependencyError) as exc:
        category_service.delete_category("4")
    assert "1 transaction" in str(exc.value)

    category_service.delete_category("4", force=True)

    # The transaction survives and is reported as uncategorized
    txn = transaction_service.get_transaction(txn_id)
    assert txn is not None
    assert transaction_service.category_label(txn) == "Uncategorized"


def test_restore_defaults(category_service):
    """Test restore defaults."""
    assert category_service.restore_defaults() == 0

    category_service.delete_category("3")
    category_service.delete_category("5")

    assert category_service.restore_defaults() == 2
    names = {c.name for c in category_service.list_categories()}
    assert {"Rent", "Payroll"} <= names
