from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Iterable

from ..errors import NotFoundError, ValidationError


def utc_timestamp() -> str:
    """UTC now as ``2024-01-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_number(value: Any) -> bool:
    # NaN and Infinity parse as floats but cannot be written back as JSON
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, float) and math.isfinite(value))


class RecordSchema(ABC):
    """Per-collection rules plugged into a CollectionStore.

    Subclasses decide which field identifies a record, how candidates are
    validated and built, and which fields an update may touch.
    """

    key = "id"
    not_found_message = "Record not found."
    updatable_fields: tuple[str, ...] = ()
    update_required_message = "No updatable fields provided."
    allow_delete = False

    def coerce_key(self, value: Any) -> Any:
        return value

    @abstractmethod
    def validate_create(self, candidate: dict, existing: Iterable[dict]) -> None:
        ...

    @abstractmethod
    def build(self, candidate: dict, existing: list[dict], now: str) -> dict:
        ...

    def changes_from(self, partial: dict) -> dict:
        """Pick the supplied updatable fields out of ``partial``.

        Missing and empty values count as "not supplied"; if nothing is left
        the update is rejected.
        """
        changes = {f: partial[f] for f in self.updatable_fields if is_text(partial.get(f))}
        if not changes:
            raise ValidationError(self.update_required_message)
        return changes

    def apply_update(self, record: dict, changes: dict, now: str) -> dict:
        updated = dict(record)
        updated.update(changes)
        return updated

    def not_found(self) -> NotFoundError:
        return NotFoundError(self.not_found_message)
