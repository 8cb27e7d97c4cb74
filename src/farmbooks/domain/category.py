"""Category domain service."""

from dataclasses import replace
from typing import Optional

import structlog

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import errors
from farmbooks.domain.defaults import COLORS, INITIAL_CATEGORIES
from farmbooks.domain.entities import Category, TransactionType
from farmbooks.domain.errors import DependencyError, NotFoundError, ValidationError
from farmbooks.utils.ids import generate_id

logger = structlog.get_logger(__name__)


class CategoryService:
    """Service for managing categories."""

    def __init__(self, store: RecordStore):
        """Initialize category service.

        Args:
            store: Record store holding the category collection
        """
        self.store = store

    def create_category(
        self, name: str, category_type: TransactionType, color: Optional[str] = None
    ) -> str:
        """Create a category.

        Args:
            name: Category name
            category_type: INCOME or EXPENSE
            color: Display color; defaults to the next palette color

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name must not be empty")
        if color is None:
            color = COLORS[len(self.store.categories) % len(COLORS)]

        category = Category(id=generate_id(), name=name, type=category_type, color=color)
        self.store.categories = [*self.store.categories, category]
        self.store.persist("categories")
        logger.info("category created", category_id=category.id, name=name)
        return category.id

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category or None if not found
        """
        return next((c for c in self.store.categories if c.id == category_id), None)

    def require_category(self, category_id: str) -> Category:
        """Get category by ID or raise NotFoundError."""
        category = self.get_category(category_id)
        if category is None:
            raise NotFoundError(errors.category_not_found(category_id))
        return category

    def find_by_name(
        self, name: str, category_type: Optional[TransactionType] = None
    ) -> Optional[Category]:
        """Find the first category whose name matches, ignoring case."""
        wanted = name.strip().lower()
        for cat in self.store.categories:
            if cat.name.lower() == wanted and (category_type is None or cat.type == category_type):
                return cat
        return None

    def list_categories(self, category_type: Optional[TransactionType] = None) -> list[Category]:
        """List categories in creation order.

        Args:
            category_type: Optional type to filter by

        Returns:
            List of categories
        """
        if category_type is None:
            return list(self.store.categories)
        return [c for c in self.store.categories if c.type == category_type]

    def update_category(self, category: Category) -> None:
        """Replace a category record as a whole.

        Args:
            category: The new version of the category (matched by ID)

        Raises:
            NotFoundError: If no category has that ID
            ValidationError: If the name is empty
        """
        self.require_category(category.id)
        if not category.name.strip():
            raise ValidationError("Category name must not be empty")

        self.store.categories = [
            category if c.id == category.id else c for c in self.store.categories
        ]
        self.store.persist("categories")
        logger.info("category updated", category_id=category.id)

    def rename_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        category_type: Optional[TransactionType] = None,
        color: Optional[str] = None,
    ) -> Category:
        """Edit selected fields of a category and store the replaced record."""
        current = self.require_category(category_id)
        updated = replace(
            current,
            name=name if name is not None else current.name,
            type=category_type if category_type is not None else current.type,
            color=color if color is not None else current.color,
        )
        self.update_category(updated)
        return updated

    def usage_count(self, category_id: str) -> int:
        """Number of transactions referencing a category."""
        return sum(1 for t in self.store.transactions if t.category_id == category_id)

    def delete_category(self, category_id: str, force: bool = False) -> None:
        """Delete a category.

        Transactions that reference the category are kept and become
        uncategorized.

        Args:
            category_id: Category ID
            force: Delete even when transactions use the category

        Raises:
            NotFoundError: If the category doesn't exist
            DependencyError: If the category is in use and force is False
        """
        self.require_category(category_id)
        in_use = self.usage_count(category_id)
        if in_use and not force:
            raise DependencyError(errors.category_delete_blocked(category_id, in_use))

        self.store.categories = [c for c in self.store.categories if c.id != category_id]
        self.store.persist("categories")
        logger.info("category deleted", category_id=category_id, orphaned_transactions=in_use)

    def restore_defaults(self) -> int:
        """Add any default category missing by name and type.

        Returns:
            Number of categories added
        """
        existing = {(c.name.lower(), c.type) for c in self.store.categories}
        existing_ids = {c.id for c in self.store.categories}
        added = []
        for default in INITIAL_CATEGORIES:
            if (default.name.lower(), default.type) in existing:
                continue
            category = default if default.id not in existing_ids else replace(default, id=generate_id())
            added.append(category)

        if added:
            self.store.categories = [*self.store.categories, *added]
            self.store.persist("categories")
        return len(added)
