"""Tests for liability service."""

import json
from datetime import date
from decimal import Decimal

import pytest

from farmbooks.domain.entities import LiabilityCategory
from farmbooks.domain.errors import NotFoundError, ValidationError


def test_add_liability(liability_service, reopen_store):
    """Test add liability."""
    liability_id = liability_service.add_liability(
        name="Farm Credit Loan",
        category=LiabilityCategory.LOAN,
        original_amount=Decimal("50000"),
        current_balance=Decimal("42000"),
        interest_rate=Decimal("5.25"),
        due_date=date(2030, 1, 1),
    )

    stored = reopen_store().liabilities[0]
    assert stored.id == liability_id
    assert stored.interest_rate == Decimal("5.25")
    assert stored.due_date == date(2030, 1, 1)


def test_due_date_optional(liability_service, temp_db, reopen_store):
    """Test due date optional."""
    liability_service.add_liability(
        name="Feed supplier",
        category=LiabilityCategory.ACCOUNTS_PAYABLE,
        original_amount=Decimal("900"),
        current_balance=Decimal("900"),
    )

    documents = json.loads(temp_db.read_collection("liabilities"))
    assert "dueDate" not in documents[0]
    assert reopen_store().liabilities[0].due_date is None


def test_negative_balance_rejected(liability_service):
    """Test negative balance rejected."""
    with pytest.raises(ValidationError):
        liability_service.add_liability(
            name="Card",
            category=LiabilityCategory.CREDIT_CARD,
            original_amount=Decimal("100"),
            current_balance=Decimal("-1"),
        )


def test_total_and_delete(liability_service):
    """Test total and delete."""
    first = liability_service.add_liability(
        name="Mortgage",
        category=LiabilityCategory.MORTGAGE,
        original_amount=Decimal("200000"),
        current_balance=Decimal("150000"),
    )
    liability_service.add_liability(
        name="Card",
        category=LiabilityCategory.CREDIT_CARD,
        original_amount=Decimal("0"),
        current_balance=Decimal("1250.50"),
    )

    assert liability_service.total_liabilities() == Decimal("151250.50")

    liability_service.delete_liability(first)
    assert liability_service.total_liabilities() == Decimal("1250.50")

    with pytest.raises(NotFoundError):
        liability_service.delete_liability(first)
