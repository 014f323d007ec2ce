"""Email verification ledger."""

from __future__ import annotations

import logging
import uuid

from mail import AbstractMailer
from models import EmailVerification
from utils.errors import TokenNotFound

logger = logging.getLogger(__name__)


class VerificationLedger:
    """Issue, resolve and consume one-time email verification tokens."""

    def __init__(self, session, mailer: AbstractMailer, base_url: str):
        self.session = session
        self.mailer = mailer
        self.base_url = base_url.rstrip("/")

    def verification_link(self, token: str) -> str:
        return f"{self.base_url}/user/verify/{token}"

    def issue(self, email: str) -> str:
        """Store a fresh token for ``email`` and mail the verification link.

        The record is committed before dispatch, so a delivery failure leaves
        a valid token that was never sent.
        """

        token = uuid.uuid4().hex
        self.session.add(EmailVerification(token=token, email=email))
        self.session.commit()

        self.mailer.send_verification(email, self.verification_link(token))
        return token

    def resolve(self, token: str) -> str:
        record = self.session.get(EmailVerification, token)
        if record is None:
            raise TokenNotFound()
        return record.email

    def consume(self, token: str) -> None:
        """Forget ``token`` so the verification link cannot be replayed."""

        record = self.session.get(EmailVerification, token)
        if record is None:
            return
        email = record.email
        self.session.delete(record)
        self.session.commit()
        logger.info("Verification token consumed for %s", email)
