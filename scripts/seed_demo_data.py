"""Seed a demo artist with a couple of items and a shopper with a cart."""

from app import create_app
from models import User, db
from services.credentials import hash_password
from services.registry import get_services

ARTIST_EMAIL = "artist@shopart.io"
SHOPPER_EMAIL = "shopper@shopart.io"
DEMO_PASSWORD = "DemoPass123!"


def get_or_create_user(email: str, password: str, bio: str = "") -> None:
    users = get_services().users
    if db.session.get(User, email) is None:
        users.create_user(
            {
                "email": email,
                "password": hash_password(password),
                "isEmailVerified": True,
                "bio": bio,
                "profilePic": "",
                "itemsList": [],
                "cart": [],
            }
        )


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        services = get_services()

        get_or_create_user(ARTIST_EMAIL, DEMO_PASSWORD, bio="Ceramics and prints.")
        get_or_create_user(SHOPPER_EMAIL, DEMO_PASSWORD)

        items_data = [
            {
                "itemName": "Vase",
                "description": "Hand-thrown clay vase.",
                "price": 45.0,
                "quantity": 3,
                "itemPic": "https://images.shopart.io/vase.png",
            },
            {
                "itemName": "Harbour Print",
                "description": "A3 risograph print.",
                "price": 20.0,
                "quantity": 10,
                "itemPic": "https://images.shopart.io/harbour.png",
            },
        ]

        if not services.users.get_user(ARTIST_EMAIL)["itemsList"]:
            item_ids = [
                services.items.create_item({"artistEmail": ARTIST_EMAIL, **data})
                for data in items_data
            ]
            services.users.update_cart(
                SHOPPER_EMAIL, {"itemId": item_ids[0], "quantity": 1}
            )

        print(f"Demo data ready: {ARTIST_EMAIL}, {SHOPPER_EMAIL} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
