"""Tests for the advisor service."""

from farmbooks.domain.advice import (
    ADVICE_SYSTEM_INSTRUCTION,
    ADVICE_TEMPERATURE,
    SUGGESTION_TEMPERATURE,
    AdvisorService,
)
from farmbooks.domain.entities import TransactionType


def test_no_transactions_means_no_advice(store, fake_client):
    """Test no transactions means no advice."""
    advisor = AdvisorService(store, fake_client)

    assert advisor.financial_advice() is None
    assert fake_client.calls == []


def test_no_client_means_no_advice(store, sample_transactions):
    """Test no client means no advice."""
    assert AdvisorService(store, None).financial_advice() is None


def test_financial_advice(store, sample_transactions, fake_client):
    """Test financial advice."""
    advisor = AdvisorService(store, fake_client)

    assert advisor.financial_advice() == "Reduce feed costs."
    call = fake_client.calls[0]
    assert call["system_instruction"] == ADVICE_SYSTEM_INSTRUCTION
    assert call["temperature"] == ADVICE_TEMPERATURE
    assert "Calves sold" in call["prompt"]
    assert '"2024-03"' in call["prompt"]


def test_advice_context(store, sample_transactions):
    """Test advice context."""
    context = AdvisorService(store, None).advice_context()

    assert context["averages"]["Sales"] == 1000.0
    assert context["averages"]["Payroll"] == 0.0
    assert context["trends"] == [{"month": "2024-03", "income": 1000.0, "expense": 300.0}]


def test_failing_client_yields_none(store, sample_transactions, make_client):
    """Test failing client yields none."""
    client = make_client(error=RuntimeError("quota exceeded"))
    assert AdvisorService(store, client).financial_advice() is None


def test_blank_reply_yields_none(store, sample_transactions, make_client):
    """Test blank reply yields none."""
    assert AdvisorService(store, make_client(reply="   ")).financial_advice() is None


def test_suggest_category(store, make_client):
    """Test suggest category."""
    client = make_client(reply=" utilities\n")
    advisor = AdvisorService(store, client)

    category = advisor.suggest_category("Electric bill for the barn")

    assert category.name == "Utilities"
    assert client.calls[0]["temperature"] == SUGGESTION_TEMPERATURE
    assert "Sales, Consulting, Rent" in client.calls[0]["prompt"]


def test_suggest_category_respects_fixed_type(store, make_client):
    """Test suggest category respects fixed type."""
    advisor = AdvisorService(store, make_client(reply="Rent"))

    assert advisor.suggest_category("Barn lease", TransactionType.INCOME) is None
    assert advisor.suggest_category("Barn lease", TransactionType.EXPENSE).id == "3"


def test_suggest_category_unknown_or_failed(store, make_client):
    """Test suggest category unknown or failed."""
    assert AdvisorService(store, make_client(reply="Fuel")).suggest_category("Diesel") is None
    assert AdvisorService(store, make_client(error=RuntimeError())).suggest_category("Diesel") is None
    assert AdvisorService(store, make_client()).suggest_category("   ") is None
