"""Session tokens and caller identity resolution."""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from flask import Response
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    set_access_cookies,
    unset_jwt_cookies,
    verify_jwt_in_request,
)

VERIFIED_CLAIM = "isEmailVerified"


@dataclass(frozen=True)
class Identity:
    """The authenticated caller as encoded in the session token."""

    email: str
    is_email_verified: bool = False


def issue_session_token(user: dict) -> str:
    """Sign a token for a user record returned by the user repository."""

    return create_access_token(
        identity=user["email"],
        additional_claims={VERIFIED_CLAIM: bool(user.get("isEmailVerified"))},
    )


def attach_session_cookie(response: Response, token: str) -> Response:
    set_access_cookies(response, token)
    return response


def clear_session_cookie(response: Response) -> Response:
    unset_jwt_cookies(response)
    return response


def current_identity() -> Identity:
    verify_jwt_in_request()
    return Identity(
        email=get_jwt_identity(),
        is_email_verified=bool(get_jwt().get(VERIFIED_CLAIM, False)),
    )


def identity_required(view):
    """Resolve the session before the view runs and pass it as ``identity``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        kwargs["identity"] = current_identity()
        return view(*args, **kwargs)

    return wrapper
