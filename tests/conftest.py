"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from services.credentials import hash_password  # noqa: E402
from services.registry import get_services  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAIL_BACKEND = "log"
    PUBLIC_BASE_URL = "http://shop.test"
    VERIFY_REDIRECT_URL = None
    ERROR_STATUS_CODES = False
    RATE_LIMIT = "500 per minute"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def ctx(app: Flask):
    """Run the test body inside an application context."""

    with app.app_context():
        yield


@pytest.fixture()
def services(ctx):
    return get_services()


def make_user_record(email: str, password: str = "Passw0rd!", **overrides) -> dict:
    record = {
        "email": email,
        "password": hash_password(password),
        "isEmailVerified": False,
        "bio": "",
        "profilePic": "",
        "itemsList": [],
        "cart": [],
    }
    record.update(overrides)
    return record


def make_item(artist_email: str, **overrides) -> dict:
    item = {
        "artistEmail": artist_email,
        "itemName": "Vase",
        "description": "clay",
        "price": 10.5,
        "quantity": 2,
        "itemPic": "http://x/y.png",
    }
    item.update(overrides)
    return item
