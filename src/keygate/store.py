"""In-memory key-value store behind the gateway.

Records are plain dicts grouped by collection and addressed by storage
key. Every operation reports a Status instead of raising, which is what
the routes translate into HTTP errors.
"""

from __future__ import annotations

import copy
import logging
import threading
from enum import Enum
from typing import Any

from keygate.identifiers import KEYSTONE_ID_LEN
from keygate.status import Status, StatusCode

logger = logging.getLogger("keygate.store")


class Collection(str, Enum):
    NETWORKS = "networks"
    SUBNETS = "subnets"
    PORTS = "ports"


class KeyValueStore:
    """Thread-safe store keyed by (collection, storage key)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[Collection, dict[str, dict[str, Any]]] = {
            c: {} for c in Collection
        }

    def create(self, collection: Collection, key: str, record: dict[str, Any]) -> Status:
        if not key or len(key) >= KEYSTONE_ID_LEN:
            return Status(StatusCode.BAD_REQUEST, f"Invalid key: {key!r}")
        with self._lock:
            bucket = self._data[collection]
            if key in bucket:
                return Status(
                    StatusCode.CONFLICT,
                    f"{collection.value} object {key} already exists",
                )
            bucket[key] = copy.deepcopy(record)
        logger.debug("Created %s/%s", collection.value, key)
        return Status(StatusCode.CREATED)

    def get(self, collection: Collection, key: str) -> tuple[Status, dict[str, Any] | None]:
        with self._lock:
            record = self._data[collection].get(key)
            if record is None:
                return (
                    Status(StatusCode.NOT_FOUND, f"{collection.value} object {key} not found"),
                    None,
                )
            return Status(StatusCode.SUCCESS), copy.deepcopy(record)

    def update(
        self, collection: Collection, key: str, changes: dict[str, Any]
    ) -> tuple[Status, dict[str, Any] | None]:
        """Apply ``changes`` and return a copy of the record taken under the same lock."""
        with self._lock:
            record = self._data[collection].get(key)
            if record is None:
                return (
                    Status(StatusCode.NOT_FOUND, f"{collection.value} object {key} not found"),
                    None,
                )
            if "id" in changes and changes["id"] != record.get("id"):
                return Status(StatusCode.NOT_ACCEPTABLE, "Object id cannot be changed"), None
            record.update(copy.deepcopy(changes))
            updated = copy.deepcopy(record)
        logger.debug("Updated %s/%s fields %s", collection.value, key, sorted(changes))
        return Status(StatusCode.SUCCESS), updated

    def delete(self, collection: Collection, key: str) -> Status:
        with self._lock:
            if self._data[collection].pop(key, None) is None:
                return Status(StatusCode.NOT_FOUND, f"{collection.value} object {key} not found")
        logger.debug("Deleted %s/%s", collection.value, key)
        return Status(StatusCode.SUCCESS)

    def list_objects(self, collection: Collection) -> list[dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._data[collection].values()]

    def count(self) -> dict[str, int]:
        with self._lock:
            return {c.value: len(bucket) for c, bucket in self._data.items()}
