import os
import logging

def resolve_log_level(name: str) -> str:
    """Return the upper-cased level name, or INFO if logging does not know it."""
    level = (name or "").upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level

LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from .constants import (
    PERPLEXITY_CONFIG,
    REPORT_CONFIG,
)
from .settings import Settings, get_settings


def check_api_keys_on_startup():
    """Check for the server-side Perplexity key on startup."""
    if not get_settings().PERPLEXITY_API_KEY:
        logger.warning(
            "PERPLEXITY_API_KEY not configured. Requests must supply their own api_key."
        )
    else:
        logger.info("Perplexity API key is configured.")

__all__ = [
    "logger",
    "LOG_LEVEL",
    "resolve_log_level",
    "PERPLEXITY_CONFIG",
    "REPORT_CONFIG",
    "Settings",
    "get_settings",
    "check_api_keys_on_startup",
]
