import os
import logging
from typing import Any, Dict, Optional, Mapping

from dotenv import load_dotenv

from wallet_analysis_web.exceptions import ConfigurationError

load_dotenv()

# === Configuration & Endpoints ===
DEFAULT_API_URL = "http://localhost:5001"
WALLET_ANALYSIS_PATH = "/wallet/analysis"

# The original page aborted the upstream call after 5 minutes
DEFAULT_TIMEOUT_SECONDS = 300
DEFAULT_LOCALE = "tr_TR"
DEFAULT_TIMEZONE = "Europe/Istanbul"

USER_AGENT = "wallet-analysis-web/1.0"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("wallet-analysis-web")
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))


def _parse_timeout(raw: Any) -> float:
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"ANALYSIS_API_TIMEOUT must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigurationError(f"ANALYSIS_API_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Read the app settings from the environment (and .env), applying overrides last.

    NEXT_PUBLIC_API_URL is still honoured so existing deployments keep working.
    """
    settings = {
        "ANALYSIS_API_URL": os.getenv("ANALYSIS_API_URL") or os.getenv("NEXT_PUBLIC_API_URL") or DEFAULT_API_URL,
        "ANALYSIS_API_TIMEOUT": os.getenv("ANALYSIS_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        "DISPLAY_LOCALE": os.getenv("DISPLAY_LOCALE", DEFAULT_LOCALE),
        "DISPLAY_TIMEZONE": os.getenv("DISPLAY_TIMEZONE", DEFAULT_TIMEZONE),
    }
    if overrides:
        settings.update(overrides)

    settings["ANALYSIS_API_URL"] = str(settings["ANALYSIS_API_URL"]).rstrip("/")
    settings["ANALYSIS_API_TIMEOUT"] = _parse_timeout(settings["ANALYSIS_API_TIMEOUT"])
    return settings
