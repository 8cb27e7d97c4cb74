"""Financial statement derivation.

Statements are derived on demand from the current collections; the period
is always all time to date.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import export, summary
from farmbooks.domain.entities import (
    BalanceSheet,
    CashFlow,
    OwnersEquity,
    ProfitAndLoss,
    TransactionType,
)
from farmbooks.domain.export import StatementKind

ZERO = Decimal("0")


class ReportService:
    """Service for building and exporting financial statements."""

    def __init__(self, store: RecordStore):
        """Initialize report service.

        Args:
            store: Record store holding all collections
        """
        self.store = store

    def profit_and_loss(self) -> ProfitAndLoss:
        """Revenue and expense rows per category with totals."""
        transactions = self.store.transactions
        categories = self.store.categories
        return ProfitAndLoss(
            revenue=tuple(
                summary.category_breakdown(transactions, categories, TransactionType.INCOME)
            ),
            total_revenue=summary.total_for_type(transactions, TransactionType.INCOME),
            expenses=tuple(
                summary.category_breakdown(transactions, categories, TransactionType.EXPENSE)
            ),
            total_expenses=summary.total_for_type(transactions, TransactionType.EXPENSE),
        )

    def balance_sheet(self) -> BalanceSheet:
        """Balance sheet from net income, livestock, fixed assets and liabilities.

        Cash and bank is approximated by all-time net income.
        """
        liabilities = tuple(self.store.liabilities)
        return BalanceSheet(
            cash_and_bank=summary.net_income(self.store.transactions),
            livestock_value=sum((s.market_value for s in self.store.animal_species), ZERO),
            fixed_asset_value=sum((a.current_value for a in self.store.assets), ZERO),
            liabilities=liabilities,
            total_liabilities=sum((l.current_balance for l in liabilities), ZERO),
        )

    def cash_flow(self) -> CashFlow:
        """Direct-method cash flow: revenue in, expenses out."""
        totals = summary.totals(self.store.transactions)
        return CashFlow(inflow=totals.income, outflow=totals.expenses)

    def owners_equity(self) -> OwnersEquity:
        """Equity total from the balance sheet and all-time net income."""
        return OwnersEquity(
            total_equity=self.balance_sheet().total_equity,
            net_income=summary.net_income(self.store.transactions),
        )

    def statement_rows(self, kind: StatementKind, as_of: Optional[date] = None) -> list[list[str]]:
        """Tabular rows for one statement."""
        as_of = as_of or date.today()
        if kind == StatementKind.PROFIT_AND_LOSS:
            return export.profit_and_loss_rows(self.profit_and_loss(), as_of)
        if kind == StatementKind.BALANCE_SHEET:
            return export.balance_sheet_rows(self.balance_sheet(), as_of)
        if kind == StatementKind.CASH_FLOW:
            return export.cash_flow_rows(self.cash_flow())
        return export.owners_equity_rows(self.owners_equity())

    def export_statement(
        self, kind: StatementKind, as_of: Optional[date] = None
    ) -> tuple[str, str]:
        """Render a statement for download.

        Args:
            kind: Which statement
            as_of: Statement date, also used in the file name (defaults to today)

        Returns:
            Tuple of (file name, CSV text)
        """
        as_of = as_of or date.today()
        rows = self.statement_rows(kind, as_of)
        return export.export_filename(kind, as_of), export.to_csv(rows)
