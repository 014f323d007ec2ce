"""Item blueprint: create, read, update and delete listed items."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from models import ItemPatch
from services.registry import get_services
from services.tokens import Identity, identity_required
from utils.errors import ItemNotFound, ValidationError
from utils.request_validation import FieldValidator, parse_json_request

item_bp = Blueprint("item", __name__)


def _validate_item(payload: dict, partial: bool = False) -> dict:
    return (
        FieldValidator(payload)
        .not_empty("itemName", optional=partial)
        .not_empty("description", optional=partial)
        .number("price", optional=partial)
        .integer("quantity", optional=partial)
        .url("itemPic", optional=partial)
        .raise_if_invalid()
    )


@item_bp.route("/<item_id>", methods=["GET"])
def get_item(item_id: str):
    item = get_services().items.get_item(item_id)
    if item is None:
        raise ItemNotFound()
    return jsonify(item)


@item_bp.route("/create", methods=["POST"])
@identity_required
def create_item(identity: Identity):
    """Create an item owned by the caller."""

    payload = parse_json_request(request)
    fields = _validate_item(payload)

    get_services().items.create_item({"artistEmail": identity.email, **fields})
    return jsonify({})


@item_bp.route("/delete/<item_id>", methods=["POST"])
@identity_required
def delete_item(item_id: str, identity: Identity):
    get_services().items.delete_item(item_id, identity.email)
    return jsonify({})


@item_bp.route("/update/<item_id>", methods=["POST"])
@identity_required
def update_item(item_id: str, identity: Identity):
    """Update any subset of an item's fields and return the merged item."""

    services = get_services()
    services.items.require_owner(item_id, identity.email)

    payload = parse_json_request(request)
    patch = ItemPatch.from_payload(_validate_item(payload, partial=True))
    if patch.is_empty():
        raise ValidationError.single(
            "body",
            "Must provide either a price, quantity, description or an item picture!",
        )

    item = services.items.update_item(item_id, patch, identity.email)
    return jsonify(item)
