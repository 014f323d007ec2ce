"""User blueprint: registration, verification, login, profile and cart."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, redirect, request

from models import UserPatch
from services.credentials import hash_password
from services.registry import get_services
from services.tokens import (
    Identity,
    attach_session_cookie,
    clear_session_cookie,
    identity_required,
    issue_session_token,
)
from utils.errors import ValidationError
from utils.request_validation import FieldValidator, parse_json_request

user_bp = Blueprint("user", __name__)

LOGIN_ERROR = "Incorrect email or password!"


@user_bp.route("/create", methods=["POST"])
def create_user():
    """Register an unverified user and send the verification email."""

    payload = parse_json_request(request)
    fields = (
        FieldValidator(payload)
        .email("email")
        .strong_password("password")
        .raise_if_invalid()
    )

    services = get_services()
    services.users.create_user(
        {
            "email": fields["email"],
            "password": hash_password(fields["password"]),
            "isEmailVerified": False,
            "bio": "",
            "profilePic": "",
            "itemsList": [],
            "cart": [],
        }
    )
    services.verification.issue(fields["email"])

    return jsonify({})


@user_bp.route("/verify/<token>", methods=["GET"])
def verify_email(token: str):
    """Target of the link mailed to new users."""

    services = get_services()
    email = services.verification.resolve(token)
    services.users.mark_verified(email)
    services.verification.consume(token)

    redirect_url = current_app.config.get("VERIFY_REDIRECT_URL")
    if redirect_url:
        return redirect(redirect_url)
    return jsonify({"message": "Email verified."})


@user_bp.route("/login", methods=["POST"])
def login():
    """Authenticate and return the user with a session cookie."""

    payload = parse_json_request(request)
    fields = (
        FieldValidator(payload)
        .email("email", LOGIN_ERROR)
        .not_empty("password", LOGIN_ERROR)
        .raise_if_invalid()
    )

    user = get_services().users.authenticate(fields["email"], fields["password"])
    response = jsonify(user)
    return attach_session_cookie(response, issue_session_token(user))


@user_bp.route("/logout", methods=["POST"])
def logout():
    return clear_session_cookie(jsonify({}))


@user_bp.route("/update", methods=["POST"])
@identity_required
def update_profile(identity: Identity):
    """Update the caller's bio and/or profile picture."""

    payload = parse_json_request(request)
    fields = (
        FieldValidator(payload)
        .string("bio", optional=True)
        .url("profilePic", optional=True)
        .raise_if_invalid()
    )

    patch = UserPatch(bio=fields.get("bio"), profile_pic=fields.get("profilePic"))
    if patch.is_empty():
        raise ValidationError.single(
            "body", "Must provide either a bio or a profile picture!"
        )

    return jsonify(get_services().users.update_profile(identity.email, patch))


@user_bp.route("/profile/<email>", methods=["GET"])
def profile(email: str):
    return jsonify(get_services().users.get_public_profile(email.strip().lower()))


@user_bp.route("/updateCart", methods=["POST"])
@identity_required
def update_cart(identity: Identity):
    """Add, change or remove (quantity 0) one line of the caller's cart."""

    payload = parse_json_request(request)
    fields = (
        FieldValidator(payload)
        .not_empty("itemId", "expected a non-empty item id")
        .integer("quantity")
        .raise_if_invalid()
    )

    user = get_services().users.update_cart(
        identity.email,
        {"itemId": fields["itemId"], "quantity": fields["quantity"]},
    )
    return jsonify(user)
