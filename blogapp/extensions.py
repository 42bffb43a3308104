# blogapp/extensions.py
from flask import Flask, current_app
from flask_cors import CORS

from .schemas import BlogSchema, UserSchema
from .storage import CollectionStore, JsonStore

# CORS is a real Flask extension (keeps init_app)
cors = CORS()


class Stores:
    """Wires the blog and user collections onto ``app.extensions``.

    Route code reads ``stores.blogs`` / ``stores.users``, which resolve
    against the current app so each app (and each test) gets its own data dir.
    """

    def __init__(self, app: Flask | None = None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask, storage=None):
        if storage is None:
            storage = JsonStore(app.config["DATA_DIR"], indent=app.config["JSON_INDENT"])
        app.extensions["stores"] = {
            "blogs": CollectionStore(storage, app.config["BLOGS_COLLECTION"], BlogSchema()),
            "users": CollectionStore(storage, app.config["USERS_COLLECTION"], UserSchema()),
        }

    @property
    def blogs(self) -> CollectionStore:
        return current_app.extensions["stores"]["blogs"]

    @property
    def users(self) -> CollectionStore:
        return current_app.extensions["stores"]["users"]


stores = Stores()
