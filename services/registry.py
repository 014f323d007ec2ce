"""Construction and lookup of the per-application service objects."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app

from mail import AbstractMailer, build_mailer
from models import db
from repositories import ItemRepository, UserRepository
from services.verification import VerificationLedger

EXTENSION_KEY = "shopart"


@dataclass
class Services:
    mailer: AbstractMailer
    users: UserRepository
    items: ItemRepository
    verification: VerificationLedger


def init_services(app: Flask, mailer: AbstractMailer | None = None) -> Services:
    """Build the repositories once and register them on ``app``."""

    mailer = mailer or build_mailer(app.config)
    users = UserRepository(db.session)
    services = Services(
        mailer=mailer,
        users=users,
        items=ItemRepository(db.session, users),
        verification=VerificationLedger(
            db.session, mailer, app.config.get("PUBLIC_BASE_URL", "")
        ),
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
