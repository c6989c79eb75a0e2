"""Centralised settings for wgrep.

Runtime knobs that are not part of a single query (timeouts, the request
identity, log verbosity) are resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the current working
directory (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

__version__ = "0.1.0"

# Load .env from the directory wgrep is invoked from
load_dotenv(Path.cwd() / ".env", override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("WGREP_REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("WGREP_USER_AGENT", f"wgrep/{__version__}")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("WGREP_LOG_LEVEL", "WARNING").upper()
    )


# Module-level singleton, import this everywhere:
#   from wgrep.config import settings
settings = Settings()
