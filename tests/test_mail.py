"""Tests for the mail backends."""

from __future__ import annotations

import pytest
import requests

from mail import LogMailer, SendGridMailer
from mail.sendgrid_mailer import SENDGRID_SEND_URL
from utils.errors import MailDeliveryError


class _FakeResponse:
    def __init__(self, status_code: int, text: str = ""):
        self.status_code = status_code
        self.text = text


class _FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response or _FakeResponse(202)
        self.error = error
        self.calls: list[dict] = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def test_log_mailer_records_outbox():
    mailer = LogMailer(sender="shop@x.com")

    mailer.send_verification("a@x.com", "http://shop.test/user/verify/abc")

    assert mailer.outbox == [
        {
            "to": "a@x.com",
            "from": "shop@x.com",
            "subject": "ShopArt – Please verify your email!",
            "link": "http://shop.test/user/verify/abc",
        }
    ]


def test_sendgrid_uses_dynamic_template():
    session = _FakeSession()
    mailer = SendGridMailer("SG.key", "shop@x.com", template_id="d-123", session=session)

    mailer.send_verification("a@x.com", "http://shop.test/user/verify/abc")

    call = session.calls[0]
    assert call["url"] == SENDGRID_SEND_URL
    assert call["headers"]["Authorization"] == "Bearer SG.key"
    assert call["json"]["template_id"] == "d-123"
    personalization = call["json"]["personalizations"][0]
    assert personalization["to"] == [{"email": "a@x.com"}]
    assert personalization["dynamic_template_data"] == {
        "link": "http://shop.test/user/verify/abc"
    }


def test_sendgrid_plain_text_without_template():
    session = _FakeSession()
    mailer = SendGridMailer("SG.key", "shop@x.com", session=session)

    mailer.send_verification("a@x.com", "http://shop.test/user/verify/abc")

    content = session.calls[0]["json"]["content"][0]
    assert content["type"] == "text/plain"
    assert "http://shop.test/user/verify/abc" in content["value"]


@pytest.mark.parametrize(
    "session",
    [
        _FakeSession(response=_FakeResponse(401, "unauthorized")),
        _FakeSession(error=requests.ConnectionError("down")),
    ],
)
def test_sendgrid_failures_raise_delivery_error(session):
    mailer = SendGridMailer("SG.key", "shop@x.com", session=session)

    with pytest.raises(MailDeliveryError):
        mailer.send_verification("a@x.com", "http://shop.test/user/verify/abc")


def test_sendgrid_requires_credentials():
    with pytest.raises(ValueError):
        SendGridMailer(None, "shop@x.com")
