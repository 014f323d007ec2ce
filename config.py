"""Application configuration module."""

import os
from datetime import timedelta


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///shopart.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Session tokens (JWT carried in an HTTP-only cookie)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "token"
    JWT_COOKIE_CSRF_PROTECT = _env_flag("JWT_COOKIE_CSRF_PROTECT")
    JWT_COOKIE_SECURE = _env_flag("JWT_COOKIE_SECURE")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv("SESSION_TTL_HOURS", "24")))

    # Domain errors are answered with HTTP 200 unless this is enabled
    ERROR_STATUS_CODES = _env_flag("ERROR_STATUS_CODES")

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Rate limiting
    RATE_LIMIT = os.getenv("RATE_LIMIT", "60 per minute")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_KEY_PREFIX = os.getenv("RATELIMIT_KEY_PREFIX", "")

    # Email verification
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "log")
    SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
    MAIL_FROM = os.getenv("MAIL_FROM", "no-reply@shopart.example")
    MAIL_TIMEOUT = float(os.getenv("MAIL_TIMEOUT", "10"))
    VERIFICATION_TEMPLATE_ID = os.getenv("VERIFICATION_TEMPLATE_ID")
    PUBLIC_BASE_URL = os.getenv(
        "PUBLIC_BASE_URL", f"http://localhost:{os.getenv('PORT', '5000')}"
    )
    VERIFY_REDIRECT_URL = os.getenv("VERIFY_REDIRECT_URL")
