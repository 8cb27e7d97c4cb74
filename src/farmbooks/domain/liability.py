"""Liability domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

import structlog

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import errors
from farmbooks.domain.entities import Liability, LiabilityCategory
from farmbooks.domain.errors import NotFoundError, ValidationError
from farmbooks.utils.ids import generate_id

logger = structlog.get_logger(__name__)


class LiabilityService:
    """Service for managing liabilities."""

    def __init__(self, store: RecordStore):
        """Initialize liability service.

        Args:
            store: Record store holding the liability collection
        """
        self.store = store

    def add_liability(
        self,
        name: str,
        category: LiabilityCategory,
        original_amount: Decimal,
        current_balance: Decimal,
        interest_rate: Decimal = Decimal("0"),
        due_date: Optional[date] = None,
        description: str = "",
    ) -> str:
        """Add a liability.

        Args:
            name: Lender or obligation name
            category: Kind of liability
            original_amount: Amount originally borrowed or owed
            current_balance: Outstanding balance, maintained by hand
            interest_rate: Annual rate in percent
            due_date: Optional due date
            description: Free text

        Returns:
            Liability ID

        Raises:
            ValidationError: If the name is empty or an amount is negative
        """
        if not name.strip():
            raise ValidationError("Liability name must not be empty")
        for field, value in (
            ("Original amount", original_amount),
            ("Current balance", current_balance),
            ("Interest rate", interest_rate),
        ):
            if value < 0:
                raise ValidationError(errors.negative_amount(field, value))

        liability = Liability(
            id=generate_id(),
            name=name.strip(),
            category=category,
            original_amount=original_amount,
            current_balance=current_balance,
            interest_rate=interest_rate,
            due_date=due_date,
            description=description,
        )
        self.store.liabilities = [*self.store.liabilities, liability]
        self.store.persist("liabilities")
        logger.info("liability added", liability_id=liability.id, name=liability.name)
        return liability.id

    def get_liability(self, liability_id: str) -> Optional[Liability]:
        """Get liability by ID.

        Args:
            liability_id: Liability ID

        Returns:
            Liability or None if not found
        """
        return next((l for l in self.store.liabilities if l.id == liability_id), None)

    def list_liabilities(self) -> list[Liability]:
        """List all liabilities in creation order."""
        return list(self.store.liabilities)

    def delete_liability(self, liability_id: str) -> None:
        """Delete a liability.

        Raises:
            NotFoundError: If the liability doesn't exist
        """
        if self.get_liability(liability_id) is None:
            raise NotFoundError(errors.liability_not_found(liability_id))

        self.store.liabilities = [l for l in self.store.liabilities if l.id != liability_id]
        self.store.persist("liabilities")
        logger.info("liability deleted", liability_id=liability_id)

    def total_liabilities(self) -> Decimal:
        """Sum of current balances."""
        return sum((l.current_balance for l in self.store.liabilities), Decimal("0"))
