from __future__ import annotations

from typing import Any, Iterable

from ..errors import ValidationError
from .base import RecordSchema, is_text

BLOG_FIELDS = ("title", "content", "author")


def next_blog_id(existing: Iterable[dict]) -> int:
    # max + 1, so deleting the newest post frees its id again
    ids = [b["id"] for b in existing if isinstance(b.get("id"), int)]
    return max(ids) + 1 if ids else 1


class BlogSchema(RecordSchema):
    key = "id"
    not_found_message = "Blog post not found."
    updatable_fields = BLOG_FIELDS
    update_required_message = "At least one of title, content, or author must be provided."
    allow_delete = True

    def coerce_key(self, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return int(value)
        return None

    def validate_create(self, candidate: dict, existing: Iterable[dict]) -> None:
        if not all(is_text(candidate.get(f)) for f in BLOG_FIELDS):
            raise ValidationError("Title, content, and author are required.")

    def build(self, candidate: dict, existing: list[dict], now: str) -> dict:
        return {
            "id": next_blog_id(existing),
            "title": candidate["title"],
            "content": candidate["content"],
            "author": candidate["author"],
            "createdAt": now,
        }

    def apply_update(self, record: dict, changes: dict, now: str) -> dict:
        updated = super().apply_update(record, changes, now)
        updated["updatedAt"] = now
        return updated
