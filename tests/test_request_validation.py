"""Tests for request validation helpers."""

from __future__ import annotations

import pytest

from utils.errors import ValidationError
from utils.request_validation import (
    MAX_INTEGER,
    FieldValidator,
    is_email,
    is_strong_password,
    is_url,
)


@pytest.mark.parametrize(
    "password, expected",
    [
        ("Passw0rd!", True),
        ("passw0rd!", False),
        ("PASSW0RD!", False),
        ("Password!", False),
        ("Passw0rd", False),
        ("Pa0!", False),
        (None, False),
    ],
)
def test_is_strong_password(password, expected):
    assert is_strong_password(password) is expected


def test_is_email_and_is_url():
    assert is_email("a@x.com")
    assert not is_email("a@")
    assert not is_email(42)
    assert is_url("http://x/y.png")
    assert is_url("https://cdn.x.com/a.png")
    assert not is_url("ftp://x/y.png")
    assert not is_url("nope")


def test_validator_collects_all_errors():
    validator = (
        FieldValidator({"price": "abc", "quantity": "3"})
        .number("price")
        .integer("quantity")
        .not_empty("itemName")
    )

    with pytest.raises(ValidationError) as excinfo:
        validator.raise_if_invalid()

    assert [error["param"] for error in excinfo.value.message] == ["price", "itemName"]
    assert validator.cleaned == {"quantity": 3}


def test_optional_fields_are_skipped_when_absent():
    cleaned = (
        FieldValidator({"bio": "hi", "profilePic": None})
        .string("bio", optional=True)
        .url("profilePic", optional=True)
        .raise_if_invalid()
    )

    assert cleaned == {"bio": "hi"}


def test_booleans_are_not_numbers():
    validator = FieldValidator({"price": True, "quantity": False}).number("price").integer("quantity")

    assert len(validator.errors) == 2


@pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", float("inf"), "1e400"])
def test_non_finite_numbers_are_invalid(value):
    validator = FieldValidator({"price": value}).number("price")

    assert validator.errors == [
        {"param": "price", "msg": "expected a non-negative number"}
    ]


def test_integer_upper_bound():
    validator = (
        FieldValidator({"quantity": MAX_INTEGER, "stock": MAX_INTEGER + 1, "big": 1e30})
        .integer("quantity")
        .integer("stock")
        .integer("big")
    )

    assert validator.cleaned == {"quantity": MAX_INTEGER}
    assert [error["param"] for error in validator.errors] == ["stock", "big"]
