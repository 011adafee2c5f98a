# src/visitor_counter/store.py
"""DynamoDB adapter for the single counter record.

Item shape: ``{"id": <counter id>, "count": <int>, "updated_at": <ISO-8601>}``.
Reads return an explicit ``Present``/``Absent`` snapshot and writes are
conditional on the snapshot they were computed from.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from visitor_counter.errors import (
    MalformedRecord,
    StoreReadError,
    StoreWriteError,
    WriteConflict,
)

logger = logging.getLogger(__name__)

KEY_ATTR = "id"
COUNT_ATTR = "count"
UPDATED_ATTR = "updated_at"


@dataclass(frozen=True)
class Present:
    value: int
    updated_at: Optional[str] = None


class _Absent:
    def __repr__(self):
        return "Absent"


Absent = _Absent()


def get_table(table_name):
    """Create the Table handle at call time so Moto can mock it."""
    ddb = boto3.resource("dynamodb")
    return ddb.Table(table_name)


def _parse_count(key, raw):
    if isinstance(raw, bool) or not isinstance(raw, (int, Decimal)):
        raise MalformedRecord(f"Counter {key!r} has non-numeric count: {raw!r}")
    if raw != int(raw) or raw < 0:
        raise MalformedRecord(f"Counter {key!r} has invalid count: {raw}")
    return int(raw)


class CounterStore:
    def __init__(self, table):
        self._table = table

    @classmethod
    def from_settings(cls, settings):
        return cls(get_table(settings.table_name))

    def get(self, key):
        try:
            resp = self._table.get_item(Key={KEY_ATTR: key}, ConsistentRead=True)
        except (ClientError, BotoCoreError) as exc:
            raise StoreReadError(str(exc)) from exc

        item = resp.get("Item")
        if item is None:
            return Absent
        if COUNT_ATTR not in item:
            raise MalformedRecord(f"Counter {key!r} has no {COUNT_ATTR!r} attribute")
        return Present(_parse_count(key, item[COUNT_ATTR]), item.get(UPDATED_ATTR))

    def put(self, key, value, updated_at, expected=Absent):
        """Write ``value`` only if the record still matches ``expected``."""
        if expected is Absent:
            condition = Attr(KEY_ATTR).not_exists()
        else:
            condition = Attr(COUNT_ATTR).eq(expected.value)

        try:
            self._table.put_item(
                Item={KEY_ATTR: key, COUNT_ATTR: value, UPDATED_ATTR: updated_at},
                ConditionExpression=condition,
            )
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code")
            if code == "ConditionalCheckFailedException":
                raise WriteConflict(
                    f"Counter {key!r} changed since it was read (expected {expected!r})"
                ) from exc
            raise StoreWriteError(str(exc)) from exc
        except BotoCoreError as exc:
            raise StoreWriteError(str(exc)) from exc
