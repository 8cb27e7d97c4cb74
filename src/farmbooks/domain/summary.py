"""Financial aggregation over transactions.

All functions are pure folds over the in-memory collections and are
recomputed on every read; nothing here is persisted.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Sequence

from farmbooks.domain.entities import (
    Category,
    CategoryTotal,
    FinancialTotals,
    MonthlyTotals,
    Transaction,
    TransactionType,
)

ZERO = Decimal("0")
UNCATEGORIZED = "Uncategorized"


def month_key(txn: Transaction) -> str:
    """Calendar year-month of a transaction (``YYYY-MM``)."""
    return txn.date.strftime("%Y-%m")


def total_for_type(transactions: Iterable[Transaction], txn_type: TransactionType) -> Decimal:
    """Sum the amounts of all transactions of one type."""
    return sum((txn.amount for txn in transactions if txn.type == txn_type), ZERO)


def totals(transactions: Sequence[Transaction]) -> FinancialTotals:
    """Total income and expenses over the full transaction set."""
    return FinancialTotals(
        income=total_for_type(transactions, TransactionType.INCOME),
        expenses=total_for_type(transactions, TransactionType.EXPENSE),
    )


def net_income(transactions: Sequence[Transaction]) -> Decimal:
    """Total income minus total expenses, all time to date."""
    return totals(transactions).net_income


def monthly_series(transactions: Iterable[Transaction]) -> list[MonthlyTotals]:
    """Group transactions by calendar month, summing income and expense.

    Returns:
        One row per month that has transactions, oldest month first
    """
    sums: dict[str, dict[TransactionType, Decimal]] = defaultdict(
        lambda: {TransactionType.INCOME: ZERO, TransactionType.EXPENSE: ZERO}
    )
    for txn in transactions:
        sums[month_key(txn)][txn.type] += txn.amount

    return [
        MonthlyTotals(
            month=month,
            income=sums[month][TransactionType.INCOME],
            expense=sums[month][TransactionType.EXPENSE],
        )
        for month in sorted(sums)
    ]


def category_breakdown(
    transactions: Iterable[Transaction],
    categories: Sequence[Category],
    txn_type: TransactionType,
) -> list[CategoryTotal]:
    """Sum transactions of one type per category.

    Rows follow the category list order and only categories with a nonzero
    total are included. Transactions whose category no longer exists are
    collected in a trailing "Uncategorized" row, so the rows always add up
    to the total for the type.

    Args:
        transactions: Transactions to aggregate
        categories: Known categories
        txn_type: Which transaction type to break down

    Returns:
        List of CategoryTotal rows
    """
    by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.type == txn_type:
            by_category[txn.category_id] += txn.amount

    rows: list[CategoryTotal] = []
    for cat in categories:
        amount = by_category.pop(cat.id, ZERO)
        if amount != ZERO:
            rows.append(CategoryTotal(category_id=cat.id, name=cat.name, amount=amount))

    orphaned = sum(by_category.values(), ZERO)
    if orphaned != ZERO:
        rows.append(CategoryTotal(category_id=None, name=UNCATEGORIZED, amount=orphaned))

    return rows


def expense_breakdown_by_name(
    transactions: Iterable[Transaction], categories: Sequence[Category]
) -> dict[str, Decimal]:
    """Expense totals keyed by category name, for the dashboard breakdown.

    Expenses whose category is missing are counted under "Other".
    """
    names = {cat.id: cat.name for cat in categories}
    data: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        name = names.get(txn.category_id, "Other")
        data[name] = data.get(name, ZERO) + txn.amount
    return data


def category_monthly_averages(
    transactions: Sequence[Transaction], categories: Sequence[Category]
) -> dict[str, Decimal]:
    """Average monthly amount per category name.

    The divisor is the number of distinct months with any transaction
    (at least one), not the number of months the category was used.
    """
    month_count = max(1, len({month_key(txn) for txn in transactions}))
    averages: dict[str, Decimal] = {}
    for cat in categories:
        total = sum((txn.amount for txn in transactions if txn.category_id == cat.id), ZERO)
        averages[cat.name] = total / month_count
    return averages


def recent_trends(transactions: Iterable[Transaction], months: int = 6) -> list[MonthlyTotals]:
    """The last ``months`` rows of the monthly series."""
    series = monthly_series(transactions)
    return series[-months:] if months > 0 else []
