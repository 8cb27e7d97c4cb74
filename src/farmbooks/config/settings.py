"""Environment-driven settings."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from environment variables.

    Command-line options override these where the CLI exposes them.
    """

    db_path: Optional[str] = None
    log_level: str = "WARNING"
    log_format: str = "console"
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from FARMBOOKS_* variables and the Gemini API key."""
        return cls(
            db_path=os.environ.get("FARMBOOKS_DB_PATH"),
            log_level=os.environ.get("FARMBOOKS_LOG_LEVEL", "WARNING").upper(),
            log_format=os.environ.get("FARMBOOKS_LOG_FORMAT", "console").lower(),
            gemini_api_key=os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY"),
            gemini_model=os.environ.get("FARMBOOKS_GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        )
