"""Mail backend that logs messages instead of delivering them."""

from __future__ import annotations

import logging

from .abstract_mailer import VERIFICATION_SUBJECT, AbstractMailer

logger = logging.getLogger(__name__)


class LogMailer(AbstractMailer):
    """Record outgoing messages in ``outbox`` and write them to the log."""

    def __init__(self, sender: str | None = None):
        self.sender = sender
        self.outbox: list[dict] = []

    def send_verification(self, to_email: str, link: str) -> None:
        message = {
            "to": to_email,
            "from": self.sender,
            "subject": VERIFICATION_SUBJECT,
            "link": link,
        }
        self.outbox.append(message)
        logger.info("Verification email for %s: %s", to_email, link)
