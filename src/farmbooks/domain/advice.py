"""Free-text financial advice and category suggestions.

The text-generation model is an opaque collaborator: any failure or empty
reply is logged and reported to the caller as "no result".
"""

import json
from decimal import Decimal
from typing import Optional, Protocol

import structlog

from farmbooks.database.record_store import RecordStore
from farmbooks.domain import summary
from farmbooks.domain.entities import Category, TransactionType

logger = structlog.get_logger(__name__)

ADVICE_SYSTEM_INSTRUCTION = (
    "You are a senior CPA and financial strategist. Provide high-level advice that goes "
    "beyond simple summaries. Use professional terminology and markdown for clear structure."
)
ADVICE_TEMPERATURE = 0.6
SUGGESTION_TEMPERATURE = 0.1
RECENT_TRANSACTION_LIMIT = 15
TREND_MONTHS = 6


class AdviceClient(Protocol):
    """Text-generation collaborator used by the advisor."""

    def generate(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: float = 0.6,
    ) -> Optional[str]: ...


def _number(value: Decimal) -> float:
    return float(round(value, 2))


class AdvisorService:
    """Service that asks the advice collaborator about the farm's books."""

    def __init__(self, store: RecordStore, client: Optional[AdviceClient]):
        """Initialize advisor service.

        Args:
            store: Record store holding transactions and categories
            client: Text-generation client, or None when none is configured
        """
        self.store = store
        self.client = client

    def advice_context(self) -> dict:
        """Per-category monthly averages and the recent monthly trend."""
        transactions = self.store.transactions
        averages = summary.category_monthly_averages(transactions, self.store.categories)
        trends = summary.recent_trends(transactions, TREND_MONTHS)
        return {
            "averages": {name: _number(value) for name, value in averages.items()},
            "trends": [
                {"month": row.month, "income": _number(row.income), "expense": _number(row.expense)}
                for row in trends
            ],
        }

    def build_advice_prompt(self) -> str:
        """Prompt with the advice context and the most recent transactions."""
        names = {c.id: c.name for c in self.store.categories}
        recent = [
            {
                "date": t.date.isoformat(),
                "desc": t.description,
                "amount": _number(t.amount),
                "type": t.type.value,
                "category": names.get(t.category_id),
            }
            for t in self.store.transactions[-RECENT_TRANSACTION_LIMIT:]
        ]
        context = self.advice_context()
        return (
            "Analyze these financial records and provide 3-4 professional, strategic insights.\n"
            "Focus on anomaly detection, efficiency improvements, and growth opportunities.\n"
            f"Category Monthly Averages: {json.dumps(context['averages'])}\n"
            f"Historical Trends (Last {TREND_MONTHS} Months): {json.dumps(context['trends'])}\n"
            f"Recent Transactions: {json.dumps(recent)}"
        )

    def financial_advice(self) -> Optional[str]:
        """Ask for strategic commentary on the current books.

        Returns:
            Advice text, or None when there are no transactions, no client is
            configured, or the call fails
        """
        if not self.store.transactions:
            return None
        if self.client is None:
            logger.info("advice skipped, no client configured")
            return None

        try:
            advice = self.client.generate(
                self.build_advice_prompt(),
                system_instruction=ADVICE_SYSTEM_INSTRUCTION,
                temperature=ADVICE_TEMPERATURE,
            )
        except Exception:
            logger.exception("failed to get advice")
            return None

        if not advice or not advice.strip():
            logger.info("advice request returned no text")
            return None
        return advice.strip()

    def suggest_category(
        self, description: str, fixed_type: Optional[TransactionType] = None
    ) -> Optional[Category]:
        """Ask which existing category best fits a transaction description.

        The reply is matched to a category name ignoring case. When
        ``fixed_type`` is given, a match of the other type is discarded.

        Returns:
            The matching category, or None
        """
        if not description.strip() or self.client is None:
            return None

        category_names = ", ".join(c.name for c in self.store.categories)
        prompt = (
            f'Based on the description "{description}", which of these categories best fits? '
            f"Options: {category_names}. Return only the category name."
        )
        try:
            suggested = self.client.generate(prompt, temperature=SUGGESTION_TEMPERATURE)
        except Exception:
            logger.exception("category suggestion failed", description=description)
            return None

        if not suggested:
            return None
        wanted = suggested.strip().lower()
        matched = next((c for c in self.store.categories if c.name.lower() == wanted), None)
        if matched is None:
            logger.info("suggested category not recognised", suggestion=suggested.strip())
            return None
        if fixed_type is not None and matched.type != fixed_type:
            return None
        return matched
