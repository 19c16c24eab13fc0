"""Centralised settings for the content extractor.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  Every value has a
default, so the service runs with no environment at all.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("EXTRACTOR_REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "EXTRACTOR_USER_AGENT",
            "Mozilla/5.0 (compatible; ContentExtractor/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    preview_chars: int = field(
        default_factory=lambda: int(os.environ.get("EXTRACTOR_PREVIEW_CHARS", "500"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("EXTRACTOR_LOG_LEVEL", "INFO").upper()
    )

    # ------------------------------------------------------------------
    # REST API
    # ------------------------------------------------------------------
    api_host: str = field(
        default_factory=lambda: os.environ.get("EXTRACTOR_API_HOST", "127.0.0.1")
    )
    api_port: int = field(
        default_factory=lambda: int(os.environ.get("EXTRACTOR_API_PORT", "8000"))
    )


# Module-level singleton — import this everywhere:
#   from content_extractor.config import settings
settings = Settings()
