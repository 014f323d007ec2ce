"""Item model definition."""

import uuid
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from . import db

# Wire name -> column attribute
ITEM_FIELDS = {
    "itemName": "item_name",
    "description": "description",
    "price": "price",
    "quantity": "quantity",
    "itemPic": "item_pic",
}


def _generate_item_id() -> str:
    return uuid.uuid4().hex


@dataclass
class ItemPatch:
    """Partial update of an item; ``None`` leaves a field untouched."""

    item_name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    item_pic: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict) -> "ItemPatch":
        return cls(**{attr: payload.get(wire) for wire, attr in ITEM_FIELDS.items()})

    def changes(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply_to(self, item: "Item") -> None:
        for attr, value in self.changes().items():
            setattr(item, attr, value)


class Item(db.Model):
    """An item listed for sale by its owning artist."""

    __tablename__ = "items"

    id = db.Column(db.String(32), primary_key=True, default=_generate_item_id)
    artist_email = db.Column(
        db.String(255),
        db.ForeignKey("users.email"),
        nullable=False,
        index=True,
    )
    item_name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Float, nullable=False, default=0.0)
    quantity = db.Column(db.Integer, nullable=False, default=0)
    item_pic = db.Column(db.String(1024), nullable=False, default="")
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
        db.CheckConstraint("quantity >= 0", name="ck_items_quantity_non_negative"),
    )

    def to_dict(self) -> dict:
        """Serialize the item to a dictionary."""

        return {
            "id": self.id,
            "artistEmail": self.artist_email,
            "itemName": self.item_name,
            "description": self.description,
            "price": self.price,
            "quantity": self.quantity,
            "itemPic": self.item_pic,
        }

    def __repr__(self) -> str:
        return f"<Item id={self.id} artist={self.artist_email}>"
