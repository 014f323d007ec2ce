"""User repository: accounts, profiles, item lists and carts."""

from __future__ import annotations

import logging

from models import Item, User, UserPatch
from utils.errors import (
    EmailInUse,
    InsufficientStock,
    InvalidCredentials,
    InvalidReference,
    UserNotFound,
)

logger = logging.getLogger(__name__)


class UserRepository:
    """CRUD over user records.

    Records cross this boundary as dictionaries shaped like
    :meth:`User.to_dict`; the password hash is only included when a caller
    asks for it explicitly.
    """

    def __init__(self, session):
        self.session = session

    def _load(self, email: str) -> User:
        user = self.session.get(User, email)
        if user is None:
            raise UserNotFound()
        return user

    def get_user(self, email: str, include_secret: bool = False) -> dict:
        return self._load(email).to_dict(include_secret=include_secret)

    def create_user(self, record: dict) -> None:
        """Persist a new user. ``record["password"]`` must already be hashed."""

        email = record["email"]
        if self.session.get(User, email) is not None:
            raise EmailInUse()

        user = User(
            email=email,
            password_hash=record["password"],
            is_email_verified=bool(record.get("isEmailVerified", False)),
            bio=record.get("bio", ""),
            profile_pic=record.get("profilePic", ""),
            items_list=list(record.get("itemsList", [])),
            cart=[dict(line) for line in record.get("cart", [])],
        )
        self.session.add(user)
        self.session.commit()
        logger.info("Created user %s", email)

    def authenticate(self, email: str, password: str) -> dict:
        user = self.session.get(User, email)
        if user is None or not user.check_password(password):
            raise InvalidCredentials()
        return user.to_dict()

    def mark_verified(self, email: str) -> None:
        user = self.session.get(User, email)
        if user is None:
            raise UserNotFound("Email cannot be found")
        user.is_email_verified = True
        self.session.commit()
        logger.info("Verified email %s", email)

    def update_profile(self, email: str, patch: UserPatch) -> dict:
        user = self._load(email)
        patch.apply_to(user)
        self.session.commit()
        return user.to_dict()

    def attach_item(self, item_id: str, email: str, *, commit: bool = True) -> None:
        user = self._load(email)
        items_list = list(user.items_list or [])
        if item_id not in items_list:
            user.items_list = items_list + [item_id]
        if commit:
            self.session.commit()

    def detach_item(self, item_id: str, email: str, *, commit: bool = True) -> None:
        user = self._load(email)
        items_list = list(user.items_list or [])
        if item_id in items_list:
            user.items_list = [existing for existing in items_list if existing != item_id]
        if commit:
            self.session.commit()

    def get_public_profile(self, email: str) -> dict:
        return self._load(email).to_profile()

    def update_cart(self, email: str, cart_line: dict) -> dict:
        """Set, add or remove one cart line.

        A quantity of zero removes the line; removing a line that is not in
        the cart leaves the cart unchanged.
        """

        item_id = cart_line["itemId"]
        quantity = int(cart_line["quantity"])

        item = self.session.get(Item, item_id)
        if item is None:
            raise InvalidReference()
        if item.quantity < quantity:
            raise InsufficientStock()

        cart = self.get_user(email)["cart"]
        idx = next(
            (i for i, line in enumerate(cart) if line["itemId"] == item_id), None
        )

        if idx is not None and quantity > 0:
            cart[idx]["quantity"] = quantity
        elif idx is not None:
            del cart[idx]
        elif quantity > 0:
            cart.append({"itemId": item_id, "quantity": quantity})

        return self.update_profile(email, UserPatch(cart=cart))
