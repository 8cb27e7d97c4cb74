"""Domain model entities for farmbooks.

These are pure data classes representing business concepts, independent of
the storage format. The record store keeps collections of these entities and
the mappers translate them to and from the stored JSON documents.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class TransactionType(str, Enum):
    """Direction of a transaction; also fixes which categories it may use."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class PopulationChange(str, Enum):
    """Kind of event recorded against an animal species."""

    BOUGHT = "BOUGHT"
    BIRTH = "BIRTH"
    SOLD = "SOLD"
    DEATH = "DEATH"

    @property
    def is_increase(self) -> bool:
        return self in (PopulationChange.BOUGHT, PopulationChange.BIRTH)


class MovementType(str, Enum):
    """Direction of an inventory stock movement."""

    IN = "IN"
    OUT = "OUT"


class AssetCategory(str, Enum):
    EQUIPMENT = "EQUIPMENT"
    VEHICLE = "VEHICLE"
    REAL_ESTATE = "REAL_ESTATE"
    TECHNOLOGY = "TECHNOLOGY"
    LIVESTOCK = "LIVESTOCK"
    OTHER = "OTHER"


class LiabilityCategory(str, Enum):
    LOAN = "LOAN"
    CREDIT_CARD = "CREDIT_CARD"
    MORTGAGE = "MORTGAGE"
    ACCOUNTS_PAYABLE = "ACCOUNTS_PAYABLE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Category:
    """Income or expense category domain entity."""

    id: str
    name: str
    type: TransactionType
    color: str


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity. The amount is never negative."""

    id: str
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    category_id: str


@dataclass(frozen=True)
class AnimalSpecies:
    """Tracked livestock group with a cached head count."""

    id: str
    name: str
    tag: str
    breed: str
    count: int
    estimated_value: Decimal
    min_sustainability_level: int

    @property
    def market_value(self) -> Decimal:
        return self.estimated_value * self.count

    @property
    def is_below_sustainability(self) -> bool:
        return self.count <= self.min_sustainability_level


@dataclass(frozen=True)
class AnimalLog:
    """Population-change event for a species."""

    id: str
    species_id: str
    date: date
    type: PopulationChange
    quantity: int
    note: str
    value_at_time: Decimal


@dataclass(frozen=True)
class Asset:
    """Fixed asset domain entity."""

    id: str
    name: str
    category: AssetCategory
    purchase_date: date
    purchase_price: Decimal
    current_value: Decimal
    description: str

    @property
    def depreciation(self) -> Decimal:
        return max(Decimal("0"), self.purchase_price - self.current_value)


@dataclass(frozen=True)
class Liability:
    """Liability domain entity."""

    id: str
    name: str
    category: LiabilityCategory
    original_amount: Decimal
    current_balance: Decimal
    interest_rate: Decimal
    due_date: Optional[date]
    description: str


@dataclass(frozen=True)
class InventoryItem:
    """Stocked consumable with a cached on-hand quantity."""

    id: str
    name: str
    sku: str
    description: str
    quantity: int
    unit_cost: Decimal
    min_stock_level: int

    @property
    def stock_value(self) -> Decimal:
        return self.unit_cost * self.quantity

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.min_stock_level


@dataclass(frozen=True)
class InventoryMovement:
    """Stock movement event for an inventory item."""

    id: str
    item_id: str
    type: MovementType
    quantity: int
    note: str
    date: date
    unit_cost_at_time: Decimal


# Derived values


@dataclass(frozen=True)
class FinancialTotals:
    income: Decimal
    expenses: Decimal

    @property
    def net_income(self) -> Decimal:
        return self.income - self.expenses


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense sums for one calendar month (``YYYY-MM``)."""

    month: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Sum of transaction amounts for one category.

    ``category_id`` is None for the row collecting transactions whose
    category no longer exists.
    """

    category_id: Optional[str]
    name: str
    amount: Decimal


@dataclass(frozen=True)
class MortalityStats:
    since: date
    total_recent_deaths: int
    species_name: str
    species_deaths: int


@dataclass(frozen=True)
class LogHistoryEntry:
    log: AnimalLog
    species_label: str


@dataclass(frozen=True)
class MovementHistoryEntry:
    movement: InventoryMovement
    item_label: str


@dataclass(frozen=True)
class PersistedAsset:
    """Asset ledger row backed by a stored Asset record."""

    asset: Asset

    @property
    def id(self) -> str:
        return self.asset.id

    @property
    def name(self) -> str:
        return self.asset.name

    @property
    def category(self) -> AssetCategory:
        return self.asset.category

    @property
    def purchase_date(self) -> Optional[date]:
        return self.asset.purchase_date

    @property
    def purchase_price(self) -> Decimal:
        return self.asset.purchase_price

    @property
    def current_value(self) -> Decimal:
        return self.asset.current_value

    @property
    def description(self) -> str:
        return self.asset.description


@dataclass(frozen=True)
class SyntheticLivestockAsset:
    """Read-only asset ledger row derived from an animal species.

    Its lifecycle belongs to the animal ledger, so it cannot be deleted
    through the asset collection.
    """

    species: AnimalSpecies

    @property
    def id(self) -> str:
        return f"animal-{self.species.id}"

    @property
    def name(self) -> str:
        return f"{self.species.name} ({self.species.count} head)"

    @property
    def category(self) -> AssetCategory:
        return AssetCategory.LIVESTOCK

    @property
    def purchase_date(self) -> Optional[date]:
        return None

    @property
    def purchase_price(self) -> Decimal:
        return Decimal("0")

    @property
    def current_value(self) -> Decimal:
        return self.species.market_value

    @property
    def description(self) -> str:
        return f"{self.species.breed} - Managed in Animal Management"


LedgerEntry = Union[PersistedAsset, SyntheticLivestockAsset]


@dataclass(frozen=True)
class AssetStats:
    total_value: Decimal
    fixed_value: Decimal
    livestock_value: Decimal
    total_depreciation: Decimal
    asset_count: int


@dataclass(frozen=True)
class ProfitAndLoss:
    revenue: tuple[CategoryTotal, ...]
    total_revenue: Decimal
    expenses: tuple[CategoryTotal, ...]
    total_expenses: Decimal

    @property
    def net_income(self) -> Decimal:
        return self.total_revenue - self.total_expenses


@dataclass(frozen=True)
class BalanceSheet:
    """Balance sheet; equity is the residual of assets over liabilities.

    ``cash_and_bank`` is all-time net income, not a reconciled cash balance.
    """

    cash_and_bank: Decimal
    livestock_value: Decimal
    fixed_asset_value: Decimal
    liabilities: tuple[Liability, ...]
    total_liabilities: Decimal

    @property
    def total_assets(self) -> Decimal:
        return self.cash_and_bank + self.livestock_value + self.fixed_asset_value

    @property
    def total_equity(self) -> Decimal:
        return self.total_assets - self.total_liabilities

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        return self.total_liabilities + self.total_equity


@dataclass(frozen=True)
class CashFlow:
    inflow: Decimal
    outflow: Decimal

    @property
    def net_cash_flow(self) -> Decimal:
        return self.inflow - self.outflow


@dataclass(frozen=True)
class OwnersEquity:
    total_equity: Decimal
    net_income: Decimal
