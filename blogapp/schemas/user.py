from __future__ import annotations

from typing import Iterable

from ..errors import ValidationError
from .base import RecordSchema, is_number, is_text

ALLOWED_GENDERS = {"male", "female"}
USER_FIELDS = ("username", "password", "fullName", "age", "email", "gender")


class UserSchema(RecordSchema):
    """Registered accounts, identified by username.

    Passwords are kept as given; nothing here hashes them.
    """

    key = "username"
    not_found_message = "User not found."

    def validate_create(self, candidate: dict, existing: Iterable[dict]) -> None:
        username = candidate.get("username")
        if not is_text(username) or len(username) < 3:
            raise ValidationError("Username must be at least 3 characters long.")

        password = candidate.get("password")
        if not is_text(password) or len(password) < 5:
            raise ValidationError("Password must be at least 5 characters long.")

        full_name = candidate.get("fullName")
        if full_name and (not isinstance(full_name, str) or len(full_name) < 10):
            raise ValidationError("Full name must be at least 10 characters long if provided.")

        age = candidate.get("age")
        if not is_number(age) or age < 10:
            raise ValidationError("Age must be at least 10.")

        email = candidate.get("email")
        if not is_text(email) or "@" not in email:
            raise ValidationError("Invalid email address.")

        gender = candidate.get("gender")
        if gender and (not isinstance(gender, str) or gender.lower() not in ALLOWED_GENDERS):
            raise ValidationError("Gender must be either 'male' or 'female'.")

        if any(u.get("username") == username for u in existing):
            raise ValidationError("Username already exists.")

    def build(self, candidate: dict, existing: list[dict], now: str) -> dict:
        # optional fields that were left out (or empty) are not written
        return {f: candidate[f] for f in USER_FIELDS if candidate.get(f) not in (None, "")}


def public_user(user: dict) -> dict:
    return {k: v for k, v in user.items() if k != "password"}
