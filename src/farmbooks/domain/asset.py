"""Fixed asset domain service and the consolidated asset ledger."""

from datetime import date
from decimal import Decimal
from typing import Optional

import structlog

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import errors
from farmbooks.domain.entities import (
    Asset,
    AssetCategory,
    AssetStats,
    LedgerEntry,
    PersistedAsset,
    SyntheticLivestockAsset,
)
from farmbooks.domain.errors import NotFoundError, ValidationError
from farmbooks.utils.ids import generate_id

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")


class AssetService:
    """Service for managing fixed assets."""

    def __init__(self, store: RecordStore):
        """Initialize asset service.

        Args:
            store: Record store holding the asset and species collections
        """
        self.store = store

    def add_asset(
        self,
        name: str,
        category: AssetCategory,
        purchase_date: date,
        purchase_price: Decimal,
        current_value: Decimal,
        description: str = "",
    ) -> str:
        """Add a fixed asset.

        Livestock is tracked through the animal ledger, so the LIVESTOCK
        category is not accepted here.

        Returns:
            Asset ID

        Raises:
            ValidationError: If the name is empty, a value is negative or the
                category is LIVESTOCK
        """
        if not name.strip():
            raise ValidationError("Asset name must not be empty")
        if category == AssetCategory.LIVESTOCK:
            raise ValidationError("Livestock is managed through the animal ledger")
        if purchase_price < 0:
            raise ValidationError(errors.negative_amount("Purchase price", purchase_price))
        if current_value < 0:
            raise ValidationError(errors.negative_amount("Current value", current_value))

        asset = Asset(
            id=generate_id(),
            name=name.strip(),
            category=category,
            purchase_date=purchase_date,
            purchase_price=purchase_price,
            current_value=current_value,
            description=description,
        )
        self.store.assets = [*self.store.assets, asset]
        self.store.persist("assets")
        logger.info("asset added", asset_id=asset.id, name=asset.name)
        return asset.id

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        """Get a stored asset by ID.

        Args:
            asset_id: Asset ID

        Returns:
            Asset or None if not found
        """
        return next((a for a in self.store.assets if a.id == asset_id), None)

    def list_assets(self) -> list[Asset]:
        """List stored assets in creation order, without livestock rows."""
        return list(self.store.assets)

    def delete_asset(self, asset_id: str) -> None:
        """Delete a stored asset.

        Raises:
            NotFoundError: If no stored asset has that ID
        """
        if self.get_asset(asset_id) is None:
            raise NotFoundError(errors.asset_not_found(asset_id))

        self.store.assets = [a for a in self.store.assets if a.id != asset_id]
        self.store.persist("assets")
        logger.info("asset deleted", asset_id=asset_id)

    def delete_entry(self, entry: PersistedAsset) -> None:
        """Delete the stored asset behind a ledger row.

        Only PersistedAsset rows can be deleted; livestock rows belong to the
        animal ledger.
        """
        if not isinstance(entry, PersistedAsset):
            raise ValidationError(
                f"'{entry.name}' is managed through the animal ledger and cannot be deleted here"
            )
        self.delete_asset(entry.asset.id)

    def ledger(self) -> list[LedgerEntry]:
        """Stored assets plus one livestock row per species, highest value first."""
        entries: list[LedgerEntry] = [PersistedAsset(asset) for asset in self.store.assets]
        entries.extend(SyntheticLivestockAsset(species) for species in self.store.animal_species)
        return sorted(entries, key=lambda entry: entry.current_value, reverse=True)

    def fixed_asset_value(self) -> Decimal:
        """Sum of current values of the stored assets."""
        return sum((a.current_value for a in self.store.assets), ZERO)

    def asset_stats(self) -> AssetStats:
        """Totals shown above the asset ledger."""
        fixed_value = self.fixed_asset_value()
        livestock_value = sum((s.market_value for s in self.store.animal_species), ZERO)
        return AssetStats(
            total_value=fixed_value + livestock_value,
            fixed_value=fixed_value,
            livestock_value=livestock_value,
            total_depreciation=sum((a.depreciation for a in self.store.assets), ZERO),
            asset_count=len(self.store.assets) + len(self.store.animal_species),
        )
