"""Tests for the Gemini advice client."""

from types import SimpleNamespace

import pytest

from farmbooks.clients.gemini import GeminiAdviceClient
from farmbooks.config.settings import Settings
from farmbooks.domain.advice import (
    ADVICE_SYSTEM_INSTRUCTION,
    ADVICE_TEMPERATURE,
    SUGGESTION_TEMPERATURE,
    AdvisorService,
)


class RecordingModels:
    """Stands in for ``genai.Client().models`` and records each request."""

    def __init__(self, text):
        self.text = text
        self.requests = []

    def generate_content(self, **kwargs):
        self.requests.append(kwargs)
        return SimpleNamespace(text=self.text)


@pytest.fixture
def make_gemini_client():
    """Factory for a Gemini client whose API calls are recorded, not sent."""

    def _make(text="Keep feed costs under control."):
        client = GeminiAdviceClient(
            settings=Settings(gemini_api_key="test-key", gemini_model="gemini-test-model")
        )
        models = RecordingModels(text)
        client._client = SimpleNamespace(models=models)
        return client, models

    return _make


def test_generate_uses_configured_model(make_gemini_client):
    """Test that requests go to the model named in the settings."""
    client, models = make_gemini_client()

    assert client.generate("How is the farm doing?") == "Keep feed costs under control."
    request = models.requests[0]
    assert request["model"] == "gemini-test-model"
    assert request["contents"] == "How is the farm doing?"


def test_explicit_model_overrides_settings():
    """Test that a model passed to the constructor wins over the settings."""
    client = GeminiAdviceClient(
        model="gemini-other",
        settings=Settings(gemini_api_key="test-key", gemini_model="gemini-test-model"),
    )
    models = RecordingModels("ok")
    client._client = SimpleNamespace(models=models)

    client.generate("Hi")

    assert models.requests[0]["model"] == "gemini-other"


def test_generate_passes_instruction_and_temperature(make_gemini_client):
    """Test that the system instruction and temperature reach the request config."""
    client, models = make_gemini_client()

    client.generate("Advise me", system_instruction=ADVICE_SYSTEM_INSTRUCTION, temperature=0.6)

    config = models.requests[0]["config"]
    assert config.system_instruction == ADVICE_SYSTEM_INSTRUCTION
    assert config.temperature == 0.6


def test_generate_without_text_returns_none(make_gemini_client):
    """Test that a response without text is reported as no result."""
    client, _ = make_gemini_client(text=None)

    assert client.generate("Anything?") is None


def test_advisor_through_gemini_client(store, sample_transactions, make_gemini_client):
    """Test the advice and suggestion temperatures end to end through the client."""
    client, models = make_gemini_client(text="Rent")
    advisor = AdvisorService(store, client)

    assert advisor.financial_advice() == "Rent"
    assert advisor.suggest_category("Barn lease").id == "3"

    advice_request, suggestion_request = models.requests
    assert advice_request["config"].temperature == ADVICE_TEMPERATURE
    assert advice_request["config"].system_instruction == ADVICE_SYSTEM_INSTRUCTION
    assert suggestion_request["config"].temperature == SUGGESTION_TEMPERATURE
    assert suggestion_request["config"].system_instruction is None


def test_advisor_with_empty_gemini_reply(store, sample_transactions, make_gemini_client):
    """Test that an empty Gemini reply gives no advice."""
    client, _ = make_gemini_client(text=None)

    assert AdvisorService(store, client).financial_advice() is None
