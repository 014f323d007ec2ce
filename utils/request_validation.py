"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

import math
import re
from typing import Any
from urllib.parse import urlparse

from email_validator import EmailNotValidError, validate_email
from flask import Request

from utils.errors import ValidationError

_SYMBOL = re.compile(r"[^A-Za-z0-9]")

# Largest value a signed 64-bit INTEGER column holds
MAX_INTEGER = 2**63 - 1


def parse_json_request(req: Request, *, allow_empty: bool = True) -> dict:
    """Return the parsed JSON body or raise a validation error."""

    if not req.is_json:
        raise ValidationError.single(
            "body", "Request content type must be application/json."
        )

    data = req.get_json(silent=True)
    if data is None:
        raise ValidationError.single("body", "Request JSON body is required.")

    if not isinstance(data, dict):
        raise ValidationError.single("body", "Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise ValidationError.single("body", "Request JSON body must not be empty.")

    return data


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_strong_password(value: Any) -> bool:
    """At least 8 characters with a lowercase, uppercase, digit and symbol."""

    if not isinstance(value, str) or len(value) < 8:
        return False
    return (
        any(c.islower() for c in value)
        and any(c.isupper() for c in value)
        and any(c.isdigit() for c in value)
        and bool(_SYMBOL.search(value))
    )


def is_url(value: Any) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return result if math.isfinite(result) else None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and re.fullmatch(r"\s*[+-]?\d+\s*", value):
        return int(value)
    return None


class FieldValidator:
    """Collect field-level errors for a JSON payload.

    Each check records ``{"param": field, "msg": message}`` on failure and
    stores the sanitized value in ``cleaned``. Optional checks skip fields
    that are absent or null. ``raise_if_invalid`` raises a single
    :class:`ValidationError` carrying every collected message.
    """

    def __init__(self, data: dict):
        self.data = data
        self.errors: list[dict] = []
        self.cleaned: dict[str, Any] = {}

    def _skip(self, field: str, optional: bool) -> bool:
        return optional and self.data.get(field) is None

    def _fail(self, field: str, msg: str) -> None:
        self.errors.append({"param": field, "msg": msg})

    def email(self, field: str, msg: str = "expected a valid email") -> "FieldValidator":
        value = self.data.get(field)
        if is_email(value):
            self.cleaned[field] = value.strip().lower()
        else:
            self._fail(field, msg)
        return self

    def strong_password(
        self,
        field: str,
        msg: str = (
            "password must be at least 8 characters with an uppercase letter, "
            "a lowercase letter, a number and a symbol"
        ),
    ) -> "FieldValidator":
        value = self.data.get(field)
        if is_strong_password(value):
            self.cleaned[field] = value
        else:
            self._fail(field, msg)
        return self

    def not_empty(
        self, field: str, msg: str = "expected type string", *, optional: bool = False
    ) -> "FieldValidator":
        if self._skip(field, optional):
            return self
        value = self.data.get(field)
        if isinstance(value, str) and value.strip():
            self.cleaned[field] = value
        else:
            self._fail(field, msg)
        return self

    def string(
        self, field: str, msg: str = "expected type string", *, optional: bool = False
    ) -> "FieldValidator":
        if self._skip(field, optional):
            return self
        value = self.data.get(field)
        if isinstance(value, str):
            self.cleaned[field] = value
        else:
            self._fail(field, msg)
        return self

    def url(
        self, field: str, msg: str = "expected type url", *, optional: bool = False
    ) -> "FieldValidator":
        if self._skip(field, optional):
            return self
        value = self.data.get(field)
        if is_url(value):
            self.cleaned[field] = value.strip()
        else:
            self._fail(field, msg)
        return self

    def number(
        self,
        field: str,
        msg: str = "expected a non-negative number",
        *,
        optional: bool = False,
        minimum: float = 0,
    ) -> "FieldValidator":
        if self._skip(field, optional):
            return self
        value = _as_float(self.data.get(field))
        if value is None or value < minimum:
            self._fail(field, msg)
        else:
            self.cleaned[field] = value
        return self

    def integer(
        self,
        field: str,
        msg: str = "expected a non-negative integer",
        *,
        optional: bool = False,
        minimum: int = 0,
        maximum: int = MAX_INTEGER,
    ) -> "FieldValidator":
        if self._skip(field, optional):
            return self
        value = _as_int(self.data.get(field))
        if value is None or not minimum <= value <= maximum:
            self._fail(field, msg)
        else:
            self.cleaned[field] = value
        return self

    def raise_if_invalid(self) -> dict[str, Any]:
        if self.errors:
            raise ValidationError(self.errors)
        return self.cleaned
