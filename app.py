"""Application factory."""

import json
import logging
import os
import uuid

from flask import Flask, current_app, g, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from mail import AbstractMailer
from models import db
from routes.item import item_bp
from routes.user import user_bp
from services.registry import init_services
from utils.errors import DomainError, SessionRequired

migrate = Migrate()
jwt = JWTManager()
limiter = Limiter(key_func=get_remote_address)


def create_app(
    config_class: type[Config] = Config, mailer: AbstractMailer | None = None
) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    init_services(app, mailer=mailer)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Rate limiting
    storage_uri = app.config.get("RATELIMIT_STORAGE_URI", "memory://")
    headers_enabled = app.config.get("RATELIMIT_HEADERS_ENABLED", True)
    key_prefix = app.config.get("RATELIMIT_KEY_PREFIX") or str(uuid.uuid4())

    global limiter
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[lambda: app.config.get("RATE_LIMIT", "60 per minute")],
        storage_uri=storage_uri,
        headers_enabled=headers_enabled,
        key_prefix=key_prefix,
    )
    limiter.init_app(app)
    app.config["RATELIMIT_KEY_PREFIX"] = key_prefix

    # Blueprints
    app.register_blueprint(user_bp, url_prefix="/user")
    app.register_blueprint(item_bp, url_prefix="/item")

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({"name": "ShopArt", "status": "running"})

    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    # Errors
    _register_error_handlers(app)

    return app


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.logger.setLevel(level)

    @app.before_request
    def _log_request():
        app.logger.info("%s %s", request.method, request.full_path.rstrip("?"))


def _domain_error_response(error: DomainError):
    response = jsonify({"error": True, "message": error.message})
    if current_app.config.get("ERROR_STATUS_CODES"):
        response.status_code = error.code
    response.headers.setdefault("X-Request-ID", g.get("request_id") or str(uuid.uuid4()))
    return response


@jwt.unauthorized_loader
def _missing_session(reason: str):
    return _domain_error_response(SessionRequired(reason))


@jwt.invalid_token_loader
def _invalid_session(reason: str):
    return _domain_error_response(SessionRequired(reason))


@jwt.expired_token_loader
def _expired_session(jwt_header: dict, jwt_payload: dict):
    return _domain_error_response(SessionRequired("Session has expired."))


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():  # pragma: no cover
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):  # pragma: no cover
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        if isinstance(error, DomainError):
            app.logger.info("%s: %s", type(error).__name__, error.message)
            return _domain_error_response(error)

        request_id = g.get("request_id") or str(uuid.uuid4())
        response = error.get_response()
        payload = {
            "error": True,
            "message": error.description,
            "request_id": request_id,
        }
        response.data = json.dumps(payload)
        response.content_type = "application/json"
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):  # pragma: no cover
        request_id = g.get("request_id") or str(uuid.uuid4())
        app.logger.exception("Unhandled application error", exc_info=error)
        payload = {
            "error": True,
            "message": "An unexpected error occurred.",
            "request_id": request_id,
        }
        response = jsonify(payload)
        response.status_code = 500
        response.headers.setdefault("X-Request-ID", request_id)
        return response


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
