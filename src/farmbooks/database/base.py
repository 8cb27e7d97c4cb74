"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional


class Database(ABC):
    """Abstract key-value database interface for farmbooks.

    Each record collection is stored as one JSON document under its
    collection key and is always overwritten wholesale.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def read_collection(self, key: str) -> Optional[str]:
        """Get the stored JSON payload for a collection, or None if absent."""
        pass

    @abstractmethod
    def write_collection(self, key: str, payload: str) -> None:
        """Store the JSON payload for a collection, replacing any previous value."""
        pass

    @abstractmethod
    def delete_collection(self, key: str) -> None:
        """Remove a stored collection. Missing keys are ignored."""
        pass

    @abstractmethod
    def list_collection_keys(self) -> list[str]:
        """List the keys of all stored collections."""
        pass
