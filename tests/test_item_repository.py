"""Tests for the item repository."""

from __future__ import annotations

import pytest

from conftest import make_item, make_user_record
from models import Item, ItemPatch, db
from utils.errors import ItemNotFound, NotOwner, UserNotFound


@pytest.fixture()
def owner(services):
    services.users.create_user(make_user_record("a@x.com"))
    services.users.create_user(make_user_record("b@x.com"))
    return "a@x.com"


def test_create_then_get_round_trip(services, owner):
    item = make_item(owner)

    item_id = services.items.create_item(item)

    assert item_id
    stored = services.items.get_item(item_id)
    assert stored == {"id": item_id, **item}
    assert item_id in services.users.get_user(owner)["itemsList"]


def test_get_missing_item_returns_none(services):
    assert services.items.get_item("nope") is None


def test_create_for_unknown_owner_stores_nothing(services):
    with pytest.raises(UserNotFound):
        services.items.create_item(make_item("ghost@x.com"))

    assert db.session.query(Item).count() == 0


def test_update_item_applies_patch(services, owner):
    item_id = services.items.create_item(make_item(owner))

    updated = services.items.update_item(
        item_id, ItemPatch(price=12.0, quantity=0), owner
    )

    assert updated["price"] == 12.0
    assert updated["quantity"] == 0
    assert updated["itemName"] == "Vase"
    assert services.items.get_item(item_id) == updated


def test_non_owner_cannot_update_or_delete(services, owner):
    item_id = services.items.create_item(make_item(owner))

    with pytest.raises(NotOwner):
        services.items.update_item(item_id, ItemPatch(price=1.0), "b@x.com")
    with pytest.raises(NotOwner):
        services.items.update_item(item_id, ItemPatch(), "b@x.com")
    with pytest.raises(NotOwner):
        services.items.delete_item(item_id, "b@x.com")

    assert services.items.get_item(item_id)["price"] == 10.5


def test_missing_item_update_and_delete(services, owner):
    with pytest.raises(ItemNotFound):
        services.items.update_item("nope", ItemPatch(price=1.0), owner)
    with pytest.raises(ItemNotFound):
        services.items.delete_item("nope", owner)


def test_delete_removes_record_and_owner_reference(services, owner):
    item_id = services.items.create_item(make_item(owner))

    services.items.delete_item(item_id, owner)

    assert services.items.get_item(item_id) is None
    assert item_id not in services.users.get_user(owner)["itemsList"]
