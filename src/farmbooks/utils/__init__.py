"""Utility functions for farmbooks."""

from farmbooks.utils.date_parser import parse_date, parse_required_date, parse_stored_date
from farmbooks.utils.amount_parser import parse_amount
from farmbooks.utils.ids import generate_id

__all__ = ["parse_date", "parse_stored_date", "parse_required_date", "parse_amount", "generate_id"]
