"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from loguru import logger

from .config import BaseConfig
from .db.session import db
from .api.health.routes import bp as health_bp
from .api.auth.routes import admin_bp, bp as auth_bp
from .api.users.routes import bp as users_bp
from .api.publications.routes import bp as publications_bp
from .api.social.routes import bp as friend_requests_bp
from .api.groups.routes import bp as groups_bp
from .api.projects.routes import bp as projects_bp
from .api.engagement.routes import comments_bp, reactions_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .log import configure_logging


def create_app(config_class: type[BaseConfig] | BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    config = config_class() if isinstance(config_class, type) else (config_class or BaseConfig())
    app.config.from_object(config)
    app.url_map.strict_slashes = False

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    CORS(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", [])}})

    # Init extensions
    db.init_app(app)

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(admin_bp, url_prefix="/api/admin")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(publications_bp, url_prefix="/api/publications")
    app.register_blueprint(friend_requests_bp, url_prefix="/api/friend-requests")
    app.register_blueprint(groups_bp, url_prefix="/api/research-groups")
    app.register_blueprint(projects_bp, url_prefix="/api/projects")
    app.register_blueprint(comments_bp, url_prefix="/api/comments")
    app.register_blueprint(reactions_bp, url_prefix="/api/reactions")
    app.register_blueprint(docs_bp)

    # Global error handlers
    register_error_handlers(app)
    logger.info("app created: db={}", db.engine.url.render_as_string(hide_password=True) if db.engine else None)
    return app
