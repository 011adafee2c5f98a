# src/visitor_counter/count_lambda.py
import json
import logging

from visitor_counter import responses
from visitor_counter.config import load_settings
from visitor_counter.counter import record_visit
from visitor_counter.store import CounterStore

logger = logging.getLogger("visitor_counter")


def _get_store(settings):
    return CounterStore.from_settings(settings)


def _apply_log_level(level):
    """Set the package logger level only when the configured level changes."""
    if logging.getLevelName(logger.level) != level:
        logger.setLevel(level)


def handler(event, context):
    try:
        settings = load_settings()
        _apply_log_level(settings.log_level)
        logger.info("Event: %s", json.dumps(event, default=str))

        store = _get_store(settings)
        count = record_visit(store, settings.counter_id, settings.max_attempts)
    except Exception as exc:
        logger.exception("Error in visitor counter")
        return responses.error(str(exc))

    return responses.success(count)
