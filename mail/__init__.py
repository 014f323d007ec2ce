"""Mail backends."""

from .abstract_mailer import AbstractMailer
from .log_mailer import LogMailer
from .sendgrid_mailer import SendGridMailer

__all__ = ["AbstractMailer", "LogMailer", "SendGridMailer", "build_mailer"]


def build_mailer(config) -> AbstractMailer:
    """Return the mail backend selected by ``MAIL_BACKEND``."""

    backend = (config.get("MAIL_BACKEND") or "log").strip().lower()
    if backend == "log":
        return LogMailer(sender=config.get("MAIL_FROM"))
    if backend == "sendgrid":
        return SendGridMailer(
            api_key=config.get("SENDGRID_API_KEY"),
            sender=config.get("MAIL_FROM"),
            template_id=config.get("VERIFICATION_TEMPLATE_ID"),
            timeout=config.get("MAIL_TIMEOUT", 10),
        )
    raise ValueError(f"Unknown MAIL_BACKEND: {backend!r}")
