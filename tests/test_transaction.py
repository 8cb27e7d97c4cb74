"""Tests for transaction service."""

from datetime import date
from decimal import Decimal

import pytest

from farmbooks.domain.entities import TransactionType
from farmbooks.domain.errors import NotFoundError, ValidationError


def test_create_transaction(transaction_service):
    """Test create transaction."""
    txn_id = transaction_service.create_transaction(
        date=date(2024, 4, 2),
        description="Hay bales",
        amount=Decimal("240.00"),
        transaction_type=TransactionType.EXPENSE,
        category_id="7",
    )

    txn = transaction_service.get_transaction(txn_id)
    assert txn.description == "Hay bales"
    assert txn.amount == Decimal("240.00")
    assert transaction_service.category_label(txn) == "Other"


def test_negative_amount_rejected(transaction_service):
    """Test negative amount rejected."""
    with pytest.raises(ValidationError):
        transaction_service.create_transaction(
            date=date(2024, 4, 2),
            description="Refund",
            amount=Decimal("-5"),
            transaction_type=TransactionType.EXPENSE,
            category_id="7",
        )


def test_zero_amount_allowed(transaction_service):
    """Test zero amount allowed."""
    txn_id = transaction_service.create_transaction(
        date=date(2024, 4, 2),
        description="Free sample",
        amount=Decimal("0"),
        transaction_type=TransactionType.INCOME,
        category_id="1",
    )
    assert transaction_service.get_transaction(txn_id).amount == Decimal("0")


def test_category_type_must_match(transaction_service):
    """Test category type must match."""
    with pytest.raises(ValidationError) as exc:
        transaction_service.create_transaction(
            date=date(2024, 4, 2),
            description="Milk",
            amount=Decimal("50"),
            transaction_type=TransactionType.INCOME,
            category_id="3",
        )
    assert "Rent" in str(exc.value)


def test_unknown_category(transaction_service):
    """Test unknown category."""
    with pytest.raises(NotFoundError):
        transaction_service.create_transaction(
            date=date(2024, 4, 2),
            description="Milk",
            amount=Decimal("50"),
            transaction_type=TransactionType.INCOME,
            category_id="nope",
        )


def test_list_newest_first(transaction_service, sample_transactions):
    """Test list newest first."""
    income_id, expense_id = sample_transactions

    assert [t.id for t in transaction_service.list_transactions()] == [expense_id, income_id]
    assert [t.id for t in transaction_service.list_transactions(TransactionType.INCOME)] == [income_id]


def test_delete_transaction(transaction_service, sample_transactions, reopen_store):
    """Test delete transaction."""
    income_id, _ = sample_transactions

    transaction_service.delete_transaction(income_id)

    assert transaction_service.get_transaction(income_id) is None
    assert len(reopen_store().transactions) == 1


def test_delete_missing_transaction(transaction_service):
    """Test delete missing transaction."""
    with pytest.raises(NotFoundError):
        transaction_service.delete_transaction("missing")
