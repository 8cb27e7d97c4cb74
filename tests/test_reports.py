"""Tests for financial statement derivation and export."""

from datetime import date
from decimal import Decimal

from farmbooks.domain.entities import LiabilityCategory, PopulationChange
from farmbooks.domain.export import StatementKind


def test_profit_and_loss(report_service, sample_transactions):
    """Test profit and loss."""
    statement = report_service.profit_and_loss()

    assert [(r.name, r.amount) for r in statement.revenue] == [("Sales", Decimal("1000"))]
    assert [(r.name, r.amount) for r in statement.expenses] == [("Rent", Decimal("300"))]
    assert statement.net_income == Decimal("700")


def test_balance_sheet_identity(report_service, sample_transactions, livestock_service, liability_service):
    """Test balance sheet identity."""
    species_id = livestock_service.add_species("Goat", Decimal("80"), 2)
    livestock_service.record_log(species_id, PopulationChange.BOUGHT, 5, date(2024, 1, 5))
    liability_service.add_liability(
        name="Equipment loan",
        category=LiabilityCategory.LOAN,
        original_amount=Decimal("2000"),
        current_balance=Decimal("1500"),
    )

    sheet = report_service.balance_sheet()

    assert sheet.cash_and_bank == Decimal("700")
    assert sheet.livestock_value == Decimal("400")
    assert sheet.total_assets == Decimal("1100")
    assert sheet.total_liabilities == Decimal("1500")
    assert sheet.total_equity == Decimal("-400")
    assert sheet.total_liabilities_and_equity == sheet.total_assets


def test_empty_books(report_service):
    """Test empty books."""
    sheet = report_service.balance_sheet()
    assert sheet.total_assets == sheet.total_liabilities == sheet.total_equity == Decimal("0")
    assert report_service.cash_flow().net_cash_flow == Decimal("0")


def test_cash_flow_and_equity(report_service, sample_transactions):
    """Test cash flow and equity."""
    flow = report_service.cash_flow()
    assert flow.inflow == Decimal("1000")
    assert flow.outflow == Decimal("300")
    assert flow.net_cash_flow == Decimal("700")

    equity = report_service.owners_equity()
    assert equity.total_equity == Decimal("700")
    assert equity.net_income == Decimal("700")


def test_export_profit_and_loss(report_service, sample_transactions):
    """Test export profit and loss."""
    filename, content = report_service.export_statement(
        StatementKind.PROFIT_AND_LOSS, date(2024, 3, 31)
    )

    assert filename == "Profit_and_Loss_2024-03-31.csv"
    lines = content.splitlines()
    assert lines[0] == '"Profit & Loss Statement"'
    assert '"Period Ending","2024-03-31"' in lines
    assert '"Total Revenue","1000.00"' in lines
    assert '"Total Expenses","300.00"' in lines
    assert '"NET INCOME","700.00"' in lines


def test_export_cash_flow_outflow_negative(report_service, sample_transactions):
    """Test export cash flow outflow negative."""
    filename, content = report_service.export_statement(StatementKind.CASH_FLOW, date(2024, 3, 31))

    assert filename == "Cash_Flow_2024-03-31.csv"
    assert '"Cash Outflow for Operations","-300.00"' in content.splitlines()


def test_export_balance_sheet(report_service, sample_transactions):
    """Test export balance sheet."""
    filename, content = report_service.export_statement(StatementKind.BALANCE_SHEET, date(2024, 3, 31))

    assert filename == "Balance_Sheet_2024-03-31.csv"
    lines = content.splitlines()
    assert '"Cash and Bank (Net Earnings)","700.00"' in lines
    assert '"Owner\'s Equity","700.00"' in lines
    assert '"Total Liabilities & Equity","700.00"' in lines
