# src/visitor_counter/config.py
import logging
import os
from dataclasses import dataclass

DEFAULT_COUNTER_ID = "visitor-count"
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    table_name: str
    counter_id: str = DEFAULT_COUNTER_ID
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    log_level: str = DEFAULT_LOG_LEVEL


def _log_level(raw):
    name = raw.strip().upper()
    # getLevelName maps known names to their numeric level and anything else to a string
    if name and isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("Unknown LOG_LEVEL %r, using %s", raw, DEFAULT_LOG_LEVEL)
    return DEFAULT_LOG_LEVEL


def load_settings(environ=None):
    """Read settings at call time so tests can change the environment per case."""
    env = os.environ if environ is None else environ

    table_name = env.get("TABLE_NAME")
    if not table_name:
        raise RuntimeError("TABLE_NAME environment variable is required")

    raw_attempts = env.get("COUNTER_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
    try:
        max_attempts = int(raw_attempts)
    except ValueError:
        raise RuntimeError(
            f"COUNTER_MAX_ATTEMPTS must be an integer, got {raw_attempts!r}"
        ) from None
    if max_attempts < 1:
        raise RuntimeError("COUNTER_MAX_ATTEMPTS must be at least 1")

    return Settings(
        table_name=table_name,
        counter_id=env.get("COUNTER_ID") or DEFAULT_COUNTER_ID,
        max_attempts=max_attempts,
        log_level=_log_level(env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
