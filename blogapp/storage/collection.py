from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Protocol

from ..errors import MalformedRequestError, UnsupportedOperationError
from ..schemas.base import RecordSchema, utc_timestamp

log = logging.getLogger(__name__)


class StoragePort(Protocol):
    def load(self, collection: str) -> List[Dict[str, Any]]:
        ...

    def save(self, collection: str, records: List[Dict[str, Any]]) -> None:
        ...


class CollectionStore:
    """One named collection of records on top of a storage port.

    Every call reloads the whole collection and every mutation writes the
    whole collection back. There is no locking: two concurrent writers on
    the same collection can lose an update (last save wins).
    """

    def __init__(
        self,
        storage: StoragePort,
        name: str,
        schema: RecordSchema,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self.storage = storage
        self.name = name
        self.schema = schema
        self.clock = clock

    def load(self) -> List[Dict[str, Any]]:
        return self.storage.load(self.name)

    def list(self) -> List[Dict[str, Any]]:
        return self.load()

    def _index_of(self, records: List[Dict[str, Any]], key: Any) -> int:
        key = self.schema.coerce_key(key)
        field = self.schema.key
        for i, record in enumerate(records):
            if key is not None and record.get(field) == key:
                return i
        raise self.schema.not_found()

    def get_by_id(self, key: Any) -> Dict[str, Any]:
        records = self.load()
        return records[self._index_of(records, key)]

    def create(self, candidate: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(candidate, dict):
            raise MalformedRequestError()
        records = self.load()
        self.schema.validate_create(candidate, records)
        record = self.schema.build(candidate, records, self.clock())
        records.append(record)
        self.storage.save(self.name, records)
        log.info("Created %s record %s", self.name, record.get(self.schema.key))
        return record

    def update(self, key: Any, partial: Dict[str, Any]) -> Dict[str, Any]:
        if not self.schema.updatable_fields:
            raise UnsupportedOperationError(f"Records in '{self.name}' cannot be updated.")
        if not isinstance(partial, dict):
            raise MalformedRequestError()
        changes = self.schema.changes_from(partial)
        records = self.load()
        i = self._index_of(records, key)
        records[i] = self.schema.apply_update(records[i], changes, self.clock())
        self.storage.save(self.name, records)
        log.info("Updated %s record %s (%s)", self.name, key, ", ".join(changes))
        return records[i]

    def delete(self, key: Any) -> Dict[str, Any]:
        if not self.schema.allow_delete:
            raise UnsupportedOperationError(f"Records in '{self.name}' cannot be deleted.")
        records = self.load()
        removed = records.pop(self._index_of(records, key))
        self.storage.save(self.name, records)
        log.info("Deleted %s record %s", self.name, key)
        return removed
