from .base import RecordSchema, utc_timestamp
from .blog import BlogSchema
from .user import UserSchema, public_user

__all__ = ["RecordSchema", "BlogSchema", "UserSchema", "public_user", "utc_timestamp"]
