"""User model definition."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from services.credentials import verify_password

from . import db


@dataclass
class UserPatch:
    """Partial update of a user record; ``None`` leaves a field untouched."""

    bio: Optional[str] = None
    profile_pic: Optional[str] = None
    cart: Optional[list] = None

    def is_empty(self) -> bool:
        return self.bio is None and self.profile_pic is None and self.cart is None

    def apply_to(self, user: "User") -> None:
        if self.bio is not None:
            user.bio = self.bio
        if self.profile_pic is not None:
            user.profile_pic = self.profile_pic
        if self.cart is not None:
            user.cart = [dict(line) for line in self.cart]


class User(db.Model):
    """A marketplace account, keyed by email."""

    __tablename__ = "users"

    email = db.Column(db.String(255), primary_key=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_email_verified = db.Column(db.Boolean, nullable=False, default=False)
    bio = db.Column(db.Text, nullable=False, default="")
    profile_pic = db.Column(db.String(1024), nullable=False, default="")
    items_list = db.Column(db.JSON, nullable=False, default=list)
    cart = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return verify_password(self.password_hash, password)

    def to_dict(self, include_secret: bool = False) -> dict:
        """Serialize the user; the password hash only on request."""

        data = {
            "email": self.email,
            "isEmailVerified": bool(self.is_email_verified),
            "bio": self.bio or "",
            "profilePic": self.profile_pic or "",
            "itemsList": list(self.items_list or []),
            "cart": [dict(line) for line in self.cart or []],
        }
        if include_secret:
            data["password"] = self.password_hash
        return data

    def to_profile(self) -> dict:
        """Public projection shown to other users."""

        return {
            "email": self.email,
            "bio": self.bio or "",
            "profilePic": self.profile_pic or "",
            "itemsList": list(self.items_list or []),
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
