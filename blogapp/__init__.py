from flask import Flask
from .config import Config
from .extensions import cors, stores
from .handlers import register_error_handlers

def create_app(config_class: type[Config] = Config, storage=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Extensions
    # answer "*" instead of echoing the Origin header
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], send_wildcard=True, supports_credentials=False)
    stores.init_app(app, storage=storage)

    # Errors
    register_error_handlers(app)

    # Blueprints
    from .routes.blogs_api import bp as blogs_api
    from .routes.users_api import bp as users_api

    app.register_blueprint(blogs_api)
    app.register_blueprint(users_api)
    # same routes under /api, as the express variant served them
    app.register_blueprint(blogs_api, url_prefix="/api", name="blogs_api_prefixed")
    app.register_blueprint(users_api, url_prefix="/api", name="users_api_prefixed")

    return app
