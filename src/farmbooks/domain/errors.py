"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def species_not_found(species_id: str) -> str:
    """Return message for missing animal species."""
    return f"Species {species_id} not found"


def asset_not_found(asset_id: str) -> str:
    """Return message for missing asset."""
    return f"Asset {asset_id} not found"


def liability_not_found(liability_id: str) -> str:
    """Return message for missing liability."""
    return f"Liability {liability_id} not found"


def inventory_item_not_found(item_id: str) -> str:
    """Return message for missing inventory item."""
    return f"Inventory item {item_id} not found"


def negative_amount(field: str, value) -> str:
    """Return message for a money field that must not be negative."""
    return f"{field} must not be negative (got {value})"


def non_positive_quantity(value: int) -> str:
    """Return message for a quantity that must be at least 1."""
    return f"Quantity must be greater than zero (got {value})"


def category_type_mismatch(category_name: str, category_type: str, transaction_type: str) -> str:
    """Return message when a transaction references a category of the other type."""
    return (
        f"Category '{category_name}' is an {category_type} category and cannot be "
        f"used for an {transaction_type} transaction"
    )


def category_delete_blocked(category_id: str, transaction_count: int) -> str:
    """Return message when a category still has transactions."""
    return (
        f"Category {category_id} is used by {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Deleting it will leave those transactions uncategorized."
    )
