"""Item repository with ownership checks."""

from __future__ import annotations

import logging

from models import Item, ItemPatch
from utils.errors import ItemNotFound, NotOwner

from .users import UserRepository

logger = logging.getLogger(__name__)


class ItemRepository:
    """CRUD over item records owned by users."""

    def __init__(self, session, users: UserRepository):
        self.session = session
        self.users = users

    def require_owner(
        self, item_id: str, requester_email: str, action: str = "update"
    ) -> Item:
        """Return the item if ``requester_email`` owns it."""

        item = self.session.get(Item, item_id)
        if item is None:
            raise ItemNotFound()
        if item.artist_email != requester_email:
            raise NotOwner(f"You are not allowed to {action} this item!")
        return item

    def create_item(self, item: dict) -> str:
        """Persist ``item`` and add it to its owner's item list.

        Both writes share one transaction; if the owner cannot be updated the
        item is not stored.
        """

        record = Item(
            artist_email=item["artistEmail"],
            item_name=item["itemName"],
            description=item["description"],
            price=float(item["price"]),
            quantity=int(item["quantity"]),
            item_pic=item["itemPic"],
        )
        self.session.add(record)
        try:
            self.session.flush()
            self.users.attach_item(record.id, record.artist_email, commit=False)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Created item %s for %s", record.id, record.artist_email)
        return record.id

    def get_item(self, item_id: str) -> dict | None:
        item = self.session.get(Item, item_id)
        return item.to_dict() if item is not None else None

    def update_item(self, item_id: str, patch: ItemPatch, requester_email: str) -> dict:
        item = self.require_owner(item_id, requester_email, "update")
        patch.apply_to(item)
        self.session.commit()
        return item.to_dict()

    def delete_item(self, item_id: str, requester_email: str) -> None:
        item = self.require_owner(item_id, requester_email, "delete")
        try:
            self.users.detach_item(item_id, requester_email, commit=False)
            self.session.delete(item)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("Deleted item %s for %s", item_id, requester_email)
