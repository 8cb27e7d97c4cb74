"""Inventory of farm consumables (feed, seed, veterinary supplies).

Works like the animal ledger: an item's on-hand quantity only changes by
recording a stock movement.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

import structlog

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import errors
from farmbooks.domain.entities import (
    InventoryItem,
    InventoryMovement,
    MovementHistoryEntry,
    MovementType,
)
from farmbooks.domain.errors import NotFoundError, ValidationError
from farmbooks.utils.ids import generate_id

logger = structlog.get_logger(__name__)

DELETED_PRODUCT = "Deleted Product"


class InventoryService:
    """Service for inventory items and stock movements."""

    def __init__(self, store: RecordStore):
        """Initialize inventory service.

        Args:
            store: Record store holding the item and movement collections
        """
        self.store = store

    def add_item(
        self,
        name: str,
        unit_cost: Decimal,
        min_stock_level: int,
        sku: str = "",
        description: str = "",
    ) -> str:
        """Add an inventory item with zero stock.

        Returns:
            Item ID

        Raises:
            ValidationError: If the name is empty or the unit cost negative
        """
        if not name.strip():
            raise ValidationError("Item name must not be empty")
        if unit_cost < 0:
            raise ValidationError(errors.negative_amount("Unit cost", unit_cost))

        item = InventoryItem(
            id=generate_id(),
            name=name.strip(),
            sku=sku,
            description=description,
            quantity=0,
            unit_cost=unit_cost,
            min_stock_level=min_stock_level,
        )
        self.store.inventory_items = [*self.store.inventory_items, item]
        self.store.persist("inventory_items")
        logger.info("inventory item added", item_id=item.id, name=item.name)
        return item.id

    def get_item(self, item_id: str) -> Optional[InventoryItem]:
        """Get inventory item by ID.

        Args:
            item_id: Item ID

        Returns:
            InventoryItem or None if not found
        """
        return next((i for i in self.store.inventory_items if i.id == item_id), None)

    def list_items(self) -> list[InventoryItem]:
        """List all inventory items in creation order."""
        return list(self.store.inventory_items)

    def record_movement(
        self,
        item_id: str,
        movement_type: MovementType,
        quantity: int,
        movement_date: date,
        note: str = "",
    ) -> Optional[InventoryMovement]:
        """Record stock in or out and adjust the item's quantity.

        Stock out never takes the quantity below zero. The movement keeps a
        snapshot of the item's unit cost.

        Returns:
            The recorded movement, or None if the item doesn't exist

        Raises:
            ValidationError: If quantity is not positive
        """
        if quantity <= 0:
            raise ValidationError(errors.non_positive_quantity(quantity))

        item = self.get_item(item_id)
        if item is None:
            logger.warning("movement dropped for unknown item", item_id=item_id)
            return None

        movement = InventoryMovement(
            id=generate_id(),
            item_id=item_id,
            type=movement_type,
            quantity=quantity,
            note=note,
            date=movement_date,
            unit_cost_at_time=item.unit_cost,
        )
        delta = quantity if movement_type == MovementType.IN else -quantity
        updated = replace(item, quantity=max(0, item.quantity + delta))

        self.store.inventory_movements = [*self.store.inventory_movements, movement]
        self.store.inventory_items = [
            updated if i.id == item_id else i for i in self.store.inventory_items
        ]
        self.store.persist("inventory_movements", "inventory_items")
        logger.info(
            "stock movement recorded",
            item_id=item_id,
            type=movement_type.value,
            quantity=quantity,
            on_hand=updated.quantity,
        )
        return movement

    def delete_item(self, item_id: str) -> int:
        """Delete an item and its movement history.

        Returns:
            Number of movements removed

        Raises:
            NotFoundError: If the item doesn't exist
        """
        if self.get_item(item_id) is None:
            raise NotFoundError(errors.inventory_item_not_found(item_id))

        remaining = [m for m in self.store.inventory_movements if m.item_id != item_id]
        removed = len(self.store.inventory_movements) - len(remaining)

        self.store.inventory_items = [i for i in self.store.inventory_items if i.id != item_id]
        self.store.inventory_movements = remaining
        self.store.persist("inventory_items", "inventory_movements")
        logger.info("inventory item deleted", item_id=item_id, movements_removed=removed)
        return removed

    def low_stock_items(self) -> list[InventoryItem]:
        """Items at or below their minimum stock level."""
        return [i for i in self.store.inventory_items if i.is_low_stock]

    def inventory_value(self) -> Decimal:
        """Value of stock on hand (quantity x unit cost, summed over items)."""
        return sum((i.stock_value for i in self.store.inventory_items), Decimal("0"))

    def history(self) -> list[MovementHistoryEntry]:
        """All movements, newest first, labelled with their item."""
        names = {i.id: i.name for i in self.store.inventory_items}
        movements = sorted(self.store.inventory_movements, key=lambda m: m.date, reverse=True)
        return [
            MovementHistoryEntry(movement=m, item_label=names.get(m.item_id, DELETED_PRODUCT))
            for m in movements
        ]
