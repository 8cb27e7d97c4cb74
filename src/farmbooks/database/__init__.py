"""Database layer for farmbooks application."""

from farmbooks.database.base import Database
from farmbooks.database.factories import create_sqlite_database
from farmbooks.database.record_store import RecordStore, COLLECTION_KEYS

__all__ = ["Database", "create_sqlite_database", "RecordStore", "COLLECTION_KEYS"]
