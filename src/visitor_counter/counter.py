# src/visitor_counter/counter.py
import logging
from datetime import datetime, timezone

from visitor_counter.errors import StoreWriteError, WriteConflict
from visitor_counter.store import Absent

logger = logging.getLogger(__name__)


def utc_now():
    return datetime.now(timezone.utc)


def isoformat(moment):
    """Millisecond ISO-8601 in UTC with a trailing ``Z``."""
    text = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def next_value(snapshot):
    if snapshot is Absent:
        return 1
    return snapshot.value + 1


def record_visit(store, key, max_attempts=1, clock=utc_now):
    """Read, increment and conditionally write the counter; return the new value.

    A lost conditional write is retried from a fresh read, up to
    ``max_attempts`` cycles in total.
    """
    for attempt in range(1, max_attempts + 1):
        snapshot = store.get(key)
        new_value = next_value(snapshot)
        try:
            store.put(key, new_value, isoformat(clock()), expected=snapshot)
        except WriteConflict as exc:
            logger.warning(
                "Write conflict on %s (attempt %d/%d): %s",
                key, attempt, max_attempts, exc,
            )
            continue
        logger.info("Counter %s updated to %d", key, new_value)
        return new_value

    raise StoreWriteError(
        f"Counter {key!r} was modified concurrently; gave up after {max_attempts} attempts"
    )
