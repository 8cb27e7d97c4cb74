"""Generic SQLAlchemy database implementation."""

from typing import Optional
from sqlalchemy.orm import Session

from farmbooks.database.base import Database
from farmbooks.database.models import StoredCollection, create_session_factory


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def read_collection(self, key: str) -> Optional[str]:
        """Get the stored JSON payload for a collection, or None if absent."""
        session = self._get_session()
        row = session.get(StoredCollection, key, populate_existing=True)
        if row is None:
            return None
        return row.payload

    def write_collection(self, key: str, payload: str) -> None:
        """Store the JSON payload for a collection, replacing any previous value."""
        session = self._get_session()
        row = session.get(StoredCollection, key)
        if row is None:
            session.add(StoredCollection(key=key, payload=payload))
        else:
            row.payload = payload
        session.commit()

    def delete_collection(self, key: str) -> None:
        """Remove a stored collection. Missing keys are ignored."""
        session = self._get_session()
        row = session.get(StoredCollection, key)
        if row is not None:
            session.delete(row)
            session.commit()

    def list_collection_keys(self) -> list[str]:
        """List the keys of all stored collections."""
        session = self._get_session()
        rows = session.query(StoredCollection.key).order_by(StoredCollection.key).all()
        return [row.key for row in rows]
