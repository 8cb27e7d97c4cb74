"""Render financial statements as downloadable CSV text.

Every field is double-quoted and amounts carry two decimals. Blank rows
separate the sections of a statement.
"""

import csv
import io
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Sequence

from farmbooks.domain.entities import BalanceSheet, CashFlow, OwnersEquity, ProfitAndLoss

Row = list[str]


class StatementKind(str, Enum):
    """Exportable statements; the value is the file name stem."""

    PROFIT_AND_LOSS = "Profit_and_Loss"
    BALANCE_SHEET = "Balance_Sheet"
    CASH_FLOW = "Cash_Flow"
    OWNERS_EQUITY = "Owners_Equity"


def money(value: Decimal) -> str:
    """Format an amount with two decimals and no grouping."""
    return f"{value:.2f}"


def profit_and_loss_rows(statement: ProfitAndLoss, as_of: date) -> list[Row]:
    return [
        ["Profit & Loss Statement"],
        ["Period Ending", as_of.isoformat()],
        [],
        ["REVENUE"],
        *[[row.name, money(row.amount)] for row in statement.revenue],
        ["Total Revenue", money(statement.total_revenue)],
        [],
        ["OPERATING EXPENSES"],
        *[[row.name, money(row.amount)] for row in statement.expenses],
        ["Total Expenses", money(statement.total_expenses)],
        [],
        ["NET INCOME", money(statement.net_income)],
    ]


def balance_sheet_rows(statement: BalanceSheet, as_of: date) -> list[Row]:
    return [
        ["Balance Sheet"],
        ["Date", as_of.isoformat()],
        [],
        ["ASSETS"],
        ["Cash and Bank (Net Earnings)", money(statement.cash_and_bank)],
        ["Livestock Value", money(statement.livestock_value)],
        ["Fixed Assets", money(statement.fixed_asset_value)],
        ["Total Assets", money(statement.total_assets)],
        [],
        ["LIABILITIES"],
        *[[l.name, money(l.current_balance)] for l in statement.liabilities],
        ["Total Liabilities", money(statement.total_liabilities)],
        [],
        ["EQUITY"],
        ["Owner's Equity", money(statement.total_equity)],
        ["Total Liabilities & Equity", money(statement.total_liabilities_and_equity)],
    ]


def cash_flow_rows(statement: CashFlow) -> list[Row]:
    return [
        ["Cash Flow Statement (Direct)"],
        [],
        ["Cash Inflow from Operations", money(statement.inflow)],
        ["Cash Outflow for Operations", f"-{money(statement.outflow)}"],
        ["Net Cash Flow", money(statement.net_cash_flow)],
    ]


def owners_equity_rows(statement: OwnersEquity) -> list[Row]:
    return [
        ["Statement of Owner's Equity"],
        [],
        ["Equity, Total (Assets - Liabilities)", money(statement.total_equity)],
        ["Current Period Net Income", money(statement.net_income)],
    ]


def to_csv(rows: Sequence[Sequence[str]]) -> str:
    """Serialize rows with every field quoted, one row per line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def export_filename(kind: StatementKind, on: date) -> str:
    """File name for an exported statement, e.g. ``Balance_Sheet_2024-03-31.csv``."""
    return f"{kind.value}_{on.isoformat()}.csv"
