"""Configuration for farmbooks."""

from farmbooks.config.settings import Settings
from farmbooks.config.logging import configure_logging

__all__ = ["Settings", "configure_logging"]
