"""Transaction domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

import structlog

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import errors
from farmbooks.domain.entities import Transaction, TransactionType
from farmbooks.domain.errors import NotFoundError, ValidationError
from farmbooks.domain.summary import UNCATEGORIZED
from farmbooks.utils.ids import generate_id

logger = structlog.get_logger(__name__)


class TransactionService:
    """Service for managing income and expense transactions."""

    def __init__(self, store: RecordStore):
        """Initialize transaction service.

        Args:
            store: Record store holding the transaction collection
        """
        self.store = store

    def create_transaction(
        self,
        date: date,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        category_id: str,
    ) -> str:
        """Create a transaction.

        Args:
            date: Transaction date
            description: What the money was for
            amount: Non-negative amount; the sign is implied by the type
            transaction_type: INCOME or EXPENSE
            category_id: ID of a category of the same type

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is negative or the category type differs
            NotFoundError: If the category doesn't exist
        """
        if amount < 0:
            raise ValidationError(errors.negative_amount("Amount", amount))

        category = next((c for c in self.store.categories if c.id == category_id), None)
        if category is None:
            raise NotFoundError(errors.category_not_found(category_id))
        if category.type != transaction_type:
            raise ValidationError(
                errors.category_type_mismatch(
                    category.name, category.type.value, transaction_type.value
                )
            )

        txn = Transaction(
            id=generate_id(),
            date=date,
            description=description,
            amount=amount,
            type=transaction_type,
            category_id=category_id,
        )
        self.store.transactions = [*self.store.transactions, txn]
        self.store.persist("transactions")
        logger.info(
            "transaction created",
            transaction_id=txn.id,
            type=transaction_type.value,
            amount=str(amount),
        )
        return txn.id

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction or None if not found
        """
        return next((t for t in self.store.transactions if t.id == transaction_id), None)

    def list_transactions(
        self, transaction_type: Optional[TransactionType] = None
    ) -> list[Transaction]:
        """List transactions, newest first.

        Args:
            transaction_type: Optional type to filter by

        Returns:
            List of transactions
        """
        transactions = [
            t
            for t in self.store.transactions
            if transaction_type is None or t.type == transaction_type
        ]
        return sorted(transactions, key=lambda t: t.date, reverse=True)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        if self.get_transaction(transaction_id) is None:
            raise NotFoundError(errors.transaction_not_found(transaction_id))

        self.store.transactions = [t for t in self.store.transactions if t.id != transaction_id]
        self.store.persist("transactions")
        logger.info("transaction deleted", transaction_id=transaction_id)

    def category_label(self, txn: Transaction) -> str:
        """Name of the transaction's category, or "Uncategorized" if it is gone."""
        category = next((c for c in self.store.categories if c.id == txn.category_id), None)
        return category.name if category is not None else UNCATEGORIZED
