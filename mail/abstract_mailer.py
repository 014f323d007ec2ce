"""Mail abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

VERIFICATION_SUBJECT = "ShopArt – Please verify your email!"


class AbstractMailer(ABC):
    """Interface for transactional mail backends."""

    @abstractmethod
    def send_verification(self, to_email: str, link: str) -> None:
        """Deliver a verification message containing ``link`` to ``to_email``."""
