"""In-memory record collections mirrored to the key-value database."""

import json
from dataclasses import dataclass
from typing import Any, Callable

import structlog

from farmbooks.database import mappers
from farmbooks.database.base import Database
from farmbooks.domain.defaults import INITIAL_CATEGORIES

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CollectionSpec:
    """How one collection is stored and what it defaults to."""

    key: str
    to_domain: Callable[[dict[str, Any]], Any]
    to_document: Callable[[Any], dict[str, Any]]
    default: Callable[[], list]


COLLECTIONS: tuple[CollectionSpec, ...] = (
    CollectionSpec("transactions", mappers.transaction_to_domain, mappers.transaction_to_document, list),
    CollectionSpec(
        "categories",
        mappers.category_to_domain,
        mappers.category_to_document,
        lambda: list(INITIAL_CATEGORIES),
    ),
    CollectionSpec("animal_species", mappers.species_to_domain, mappers.species_to_document, list),
    CollectionSpec("animal_logs", mappers.animal_log_to_domain, mappers.animal_log_to_document, list),
    CollectionSpec("assets", mappers.asset_to_domain, mappers.asset_to_document, list),
    CollectionSpec("liabilities", mappers.liability_to_domain, mappers.liability_to_document, list),
    CollectionSpec(
        "inventory_items",
        mappers.inventory_item_to_domain,
        mappers.inventory_item_to_document,
        list,
    ),
    CollectionSpec(
        "inventory_movements",
        mappers.inventory_movement_to_domain,
        mappers.inventory_movement_to_document,
        list,
    ),
)

COLLECTION_KEYS: tuple[str, ...] = tuple(spec.key for spec in COLLECTIONS)


class RecordStore:
    """Application state: every record collection, held in memory.

    Each collection is an attribute named after its storage key. Services
    mutate a collection by rebinding the attribute and then call
    :meth:`persist` with the keys they changed; the full collection is
    serialized and overwrites the stored value.
    """

    def __init__(self, db: Database):
        """Initialize the record store.

        Args:
            db: Database instance used for persistence
        """
        self.db = db
        self._specs = {spec.key: spec for spec in COLLECTIONS}
        for spec in COLLECTIONS:
            setattr(self, spec.key, spec.default())

    def load(self) -> None:
        """Read every collection from the database.

        A collection that is absent, or whose stored value cannot be
        deserialized, falls back to its default (empty, or the seed
        categories). Anything that deserializes is trusted as-is.
        """
        for spec in COLLECTIONS:
            setattr(self, spec.key, self._load_collection(spec))

    def _load_collection(self, spec: CollectionSpec) -> list:
        payload = self.db.read_collection(spec.key)
        if payload is None:
            return spec.default()

        try:
            documents = json.loads(payload)
            if not isinstance(documents, list):
                raise TypeError(f"expected a JSON array, got {type(documents).__name__}")
            return [spec.to_domain(document) for document in documents]
        except (ValueError, KeyError, TypeError, ArithmeticError) as e:
            logger.warning(
                "stored collection unreadable, using default",
                collection=spec.key,
                error=str(e),
            )
            return spec.default()

    def persist(self, *keys: str) -> None:
        """Write the named collections to the database.

        Args:
            keys: Collection keys to persist

        Raises:
            KeyError: If a key is not a known collection
        """
        for key in keys:
            spec = self._specs[key]
            documents = [spec.to_document(record) for record in getattr(self, key)]
            self.db.write_collection(key, json.dumps(documents))
            logger.debug("collection persisted", collection=key, records=len(documents))

    def persist_all(self) -> None:
        """Write every collection to the database."""
        self.persist(*COLLECTION_KEYS)
