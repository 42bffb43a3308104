from flask import Blueprint, current_app, jsonify

from ..extensions import stores
from ..utils.requests import json_body

bp = Blueprint("blogs_api", __name__)


@bp.post("/blogs")
def create_blog():
    blog = stores.blogs.create(json_body())
    current_app.logger.info("Blog %s created by %s", blog["id"], blog["author"])
    return jsonify({"message": "Blog post created successfully!", "blog": blog}), 201


@bp.get("/blogs")
def list_blogs():
    return jsonify(stores.blogs.list())


@bp.get("/blogs/<int:blog_id>")
def get_blog(blog_id):
    return jsonify(stores.blogs.get_by_id(blog_id))


@bp.put("/blogs/<int:blog_id>")
def update_blog(blog_id):
    blog = stores.blogs.update(blog_id, json_body())
    return jsonify({"message": "Blog post updated successfully!", "blog": blog})


@bp.delete("/blogs/<int:blog_id>")
def delete_blog(blog_id):
    stores.blogs.delete(blog_id)
    return jsonify({"message": "Blog post deleted successfully."})
