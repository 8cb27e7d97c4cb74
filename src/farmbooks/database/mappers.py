"""Mapper functions to convert between domain entities and stored documents.

Collections are stored as JSON arrays of camelCase objects with ISO dates and
plain numeric amounts. This layer isolates the conversion so the domain
entities can stay typed (Decimal, date, enums) while the stored format stays
stable.
"""

from decimal import Decimal
from typing import Any, Optional

from farmbooks.domain import entities as domain
from farmbooks.utils.date_parser import parse_required_date, parse_stored_date


def _decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _iso(value: Optional[Any]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def category_to_domain(raw: dict[str, Any]) -> domain.Category:
    """Convert a stored category document to a Category entity."""
    return domain.Category(
        id=str(raw["id"]),
        name=raw["name"],
        type=domain.TransactionType(raw["type"]),
        color=raw.get("color", ""),
    )


def category_to_document(category: domain.Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "type": category.type.value,
        "color": category.color,
    }


def transaction_to_domain(raw: dict[str, Any]) -> domain.Transaction:
    """Convert a stored transaction document to a Transaction entity."""
    return domain.Transaction(
        id=str(raw["id"]),
        date=parse_required_date(raw.get("date")),
        description=raw.get("description", ""),
        amount=_decimal(raw["amount"]),
        type=domain.TransactionType(raw["type"]),
        category_id=str(raw.get("categoryId", "")),
    )


def transaction_to_document(transaction: domain.Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "date": _iso(transaction.date),
        "description": transaction.description,
        "amount": _number(transaction.amount),
        "type": transaction.type.value,
        "categoryId": transaction.category_id,
    }


def species_to_domain(raw: dict[str, Any]) -> domain.AnimalSpecies:
    """Convert a stored species document to an AnimalSpecies entity."""
    return domain.AnimalSpecies(
        id=str(raw["id"]),
        name=raw["name"],
        tag=raw.get("tag", ""),
        breed=raw.get("breed", ""),
        count=int(raw.get("count", 0)),
        estimated_value=_decimal(raw.get("estimatedValue", 0)),
        min_sustainability_level=int(raw.get("minSustainabilityLevel", 0)),
    )


def species_to_document(species: domain.AnimalSpecies) -> dict[str, Any]:
    return {
        "id": species.id,
        "name": species.name,
        "tag": species.tag,
        "breed": species.breed,
        "count": species.count,
        "estimatedValue": _number(species.estimated_value),
        "minSustainabilityLevel": species.min_sustainability_level,
    }


def animal_log_to_domain(raw: dict[str, Any]) -> domain.AnimalLog:
    """Convert a stored log document to an AnimalLog entity."""
    return domain.AnimalLog(
        id=str(raw["id"]),
        species_id=str(raw["speciesId"]),
        date=parse_required_date(raw.get("date")),
        type=domain.PopulationChange(raw["type"]),
        quantity=int(raw["quantity"]),
        note=raw.get("note", ""),
        value_at_time=_decimal(raw.get("valueAtTime", 0)),
    )


def animal_log_to_document(log: domain.AnimalLog) -> dict[str, Any]:
    return {
        "id": log.id,
        "speciesId": log.species_id,
        "date": _iso(log.date),
        "type": log.type.value,
        "quantity": log.quantity,
        "note": log.note,
        "valueAtTime": _number(log.value_at_time),
    }


def asset_to_domain(raw: dict[str, Any]) -> domain.Asset:
    """Convert a stored asset document to an Asset entity."""
    return domain.Asset(
        id=str(raw["id"]),
        name=raw["name"],
        category=domain.AssetCategory(raw.get("category", "OTHER")),
        purchase_date=parse_stored_date(raw.get("purchaseDate")),
        purchase_price=_decimal(raw.get("purchasePrice", 0)),
        current_value=_decimal(raw.get("currentValue", 0)),
        description=raw.get("description", ""),
    )


def asset_to_document(asset: domain.Asset) -> dict[str, Any]:
    return {
        "id": asset.id,
        "name": asset.name,
        "category": asset.category.value,
        "purchaseDate": _iso(asset.purchase_date),
        "purchasePrice": _number(asset.purchase_price),
        "currentValue": _number(asset.current_value),
        "description": asset.description,
    }


def liability_to_domain(raw: dict[str, Any]) -> domain.Liability:
    """Convert a stored liability document to a Liability entity."""
    return domain.Liability(
        id=str(raw["id"]),
        name=raw["name"],
        category=domain.LiabilityCategory(raw.get("category", "OTHER")),
        original_amount=_decimal(raw.get("originalAmount", 0)),
        current_balance=_decimal(raw.get("currentBalance", 0)),
        interest_rate=_decimal(raw.get("interestRate", 0)),
        due_date=parse_stored_date(raw.get("dueDate")),
        description=raw.get("description", ""),
    )


def liability_to_document(liability: domain.Liability) -> dict[str, Any]:
    document = {
        "id": liability.id,
        "name": liability.name,
        "category": liability.category.value,
        "originalAmount": _number(liability.original_amount),
        "currentBalance": _number(liability.current_balance),
        "interestRate": _number(liability.interest_rate),
        "description": liability.description,
    }
    if liability.due_date is not None:
        document["dueDate"] = _iso(liability.due_date)
    return document


def inventory_item_to_domain(raw: dict[str, Any]) -> domain.InventoryItem:
    """Convert a stored inventory item document to an InventoryItem entity."""
    return domain.InventoryItem(
        id=str(raw["id"]),
        name=raw["name"],
        sku=raw.get("sku", ""),
        description=raw.get("description", ""),
        quantity=int(raw.get("quantity", 0)),
        unit_cost=_decimal(raw.get("unitCost", 0)),
        min_stock_level=int(raw.get("minStockLevel", 0)),
    )


def inventory_item_to_document(item: domain.InventoryItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "sku": item.sku,
        "description": item.description,
        "quantity": item.quantity,
        "unitCost": _number(item.unit_cost),
        "minStockLevel": item.min_stock_level,
    }


def inventory_movement_to_domain(raw: dict[str, Any]) -> domain.InventoryMovement:
    """Convert a stored movement document to an InventoryMovement entity."""
    return domain.InventoryMovement(
        id=str(raw["id"]),
        item_id=str(raw["itemId"]),
        type=domain.MovementType(raw["type"]),
        quantity=int(raw["quantity"]),
        note=raw.get("note", ""),
        date=parse_required_date(raw.get("date")),
        unit_cost_at_time=_decimal(raw.get("unitCostAtTime", 0)),
    )


def inventory_movement_to_document(movement: domain.InventoryMovement) -> dict[str, Any]:
    return {
        "id": movement.id,
        "itemId": movement.item_id,
        "type": movement.type.value,
        "quantity": movement.quantity,
        "note": movement.note,
        "date": _iso(movement.date),
        "unitCostAtTime": _number(movement.unit_cost_at_time),
    }
