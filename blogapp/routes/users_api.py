from flask import Blueprint, current_app, jsonify

from ..extensions import stores
from ..schemas import public_user
from ..utils.requests import json_body

bp = Blueprint("users_api", __name__)


@bp.post("/register")
@bp.post("/users")
def register_user():
    user = stores.users.create(json_body())
    current_app.logger.info("Registered user %s", user["username"])
    return jsonify({"message": "User registered successfully!", "user": public_user(user)}), 201
