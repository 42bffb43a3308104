"""
Shared test fixtures and configuration for the blog API tests.
"""
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from blogapp import create_app
from blogapp.config import TestConfig
from blogapp.schemas import BlogSchema, UserSchema
from blogapp.storage import CollectionStore, JsonStore, MemoryStore


FIXED_NOW = "2024-05-01T12:00:00.000Z"
LATER = "2024-05-02T08:30:00.000Z"


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for JsonStore tests."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def app(temp_data_dir: Path) -> Flask:
    """Create a test Flask application writing into a temp data dir."""

    class _Config(TestConfig):
        DATA_DIR = temp_data_dir

    app = create_app(_Config)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def json_store(temp_data_dir: Path) -> JsonStore:
    """Create a JsonStore instance with temporary directory."""
    return JsonStore(str(temp_data_dir))


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


class Clock:
    """Returns queued timestamps, repeating the last one."""

    def __init__(self, *stamps):
        self.stamps = list(stamps) or [FIXED_NOW]

    def __call__(self) -> str:
        if len(self.stamps) > 1:
            return self.stamps.pop(0)
        return self.stamps[0]


@pytest.fixture
def clock() -> Clock:
    return Clock(FIXED_NOW, LATER)


@pytest.fixture
def blog_store(memory_store: MemoryStore, clock: Clock) -> CollectionStore:
    return CollectionStore(memory_store, "blogs", BlogSchema(), clock=clock)


@pytest.fixture
def user_store(memory_store: MemoryStore) -> CollectionStore:
    return CollectionStore(memory_store, "users", UserSchema())


@pytest.fixture
def valid_user() -> dict:
    return {
        "username": "alice",
        "password": "secret1",
        "fullName": "Alice Liddell",
        "age": 21,
        "email": "alice@example.com",
        "gender": "Female",
    }

