"""Record repositories for users and items."""

from .items import ItemRepository
from .users import UserRepository

__all__ = ["ItemRepository", "UserRepository"]
