from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from .errors import StorageCorruptError, StoreError


def _store_error(e: StoreError):
    return jsonify(e.to_dict()), e.status_code


def _storage_corrupt(e: StorageCorruptError):
    current_app.logger.error("Refusing request, %s", e.message)
    return jsonify(e.to_dict()), e.status_code


def _http_error(e: HTTPException):
    # 404 / 405 from routing, or an abort() somewhere
    return jsonify({"error": e.name}), e.code


def _unhandled(e: Exception):
    current_app.logger.exception("Unhandled error")
    return jsonify({"error": "Something went wrong!"}), 500


def register_error_handlers(app):
    app.register_error_handler(StorageCorruptError, _storage_corrupt)
    app.register_error_handler(StoreError, _store_error)
    app.register_error_handler(HTTPException, _http_error)
    app.register_error_handler(Exception, _unhandled)
