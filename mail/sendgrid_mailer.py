"""SendGrid v3 Mail Send backend."""

from __future__ import annotations

import logging

import requests

from utils.errors import MailDeliveryError

from .abstract_mailer import VERIFICATION_SUBJECT, AbstractMailer

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridMailer(AbstractMailer):
    """Deliver verification messages through the SendGrid HTTP API."""

    def __init__(
        self,
        api_key: str | None,
        sender: str | None,
        template_id: str | None = None,
        timeout: float = 10,
        session: requests.Session | None = None,
    ):
        if not api_key:
            raise ValueError("SENDGRID_API_KEY is required for the sendgrid mail backend.")
        if not sender:
            raise ValueError("MAIL_FROM is required for the sendgrid mail backend.")
        self.api_key = api_key
        self.sender = sender
        self.template_id = template_id
        self.timeout = timeout
        self.session = session or requests.Session()

    def _build_payload(self, to_email: str, link: str) -> dict:
        payload = {
            "from": {"email": self.sender},
            "subject": VERIFICATION_SUBJECT,
        }
        if self.template_id:
            payload["template_id"] = self.template_id
            payload["personalizations"] = [
                {"to": [{"email": to_email}], "dynamic_template_data": {"link": link}}
            ]
        else:
            payload["personalizations"] = [{"to": [{"email": to_email}]}]
            payload["content"] = [
                {
                    "type": "text/plain",
                    "value": f"Please verify your email address by visiting {link}",
                }
            ]
        return payload

    def send_verification(self, to_email: str, link: str) -> None:
        try:
            response = self.session.post(
                SENDGRID_SEND_URL,
                json=self._build_payload(to_email, link),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("SendGrid request failed for %s: %s", to_email, exc)
            raise MailDeliveryError() from exc

        if response.status_code >= 300:
            logger.error(
                "SendGrid rejected verification email for %s: %s %s",
                to_email,
                response.status_code,
                response.text[:200],
            )
            raise MailDeliveryError()

        logger.info("Verification email dispatched to %s", to_email)
