"""Seed data for a fresh farm ledger."""

from farmbooks.domain.entities import Category, TransactionType

INITIAL_CATEGORIES: tuple[Category, ...] = (
    Category(id="1", name="Sales", type=TransactionType.INCOME, color="#10b981"),
    Category(id="2", name="Consulting", type=TransactionType.INCOME, color="#34d399"),
    Category(id="3", name="Rent", type=TransactionType.EXPENSE, color="#ef4444"),
    Category(id="4", name="Utilities", type=TransactionType.EXPENSE, color="#f97316"),
    Category(id="5", name="Payroll", type=TransactionType.EXPENSE, color="#8b5cf6"),
    Category(id="6", name="Marketing", type=TransactionType.EXPENSE, color="#3b82f6"),
    Category(id="7", name="Other", type=TransactionType.EXPENSE, color="#64748b"),
)

# Palette offered for new categories
COLORS: tuple[str, ...] = (
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#8b5cf6",
    "#ec4899",
    "#06b6d4",
)
