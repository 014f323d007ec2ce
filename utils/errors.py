"""Domain exceptions raised by repositories, services and handlers."""

from __future__ import annotations

from werkzeug.exceptions import (
    BadGateway,
    BadRequest,
    Conflict,
    Forbidden,
    NotFound,
    Unauthorized,
)


class DomainError:
    """Marker for failures that are reported as ``{error: true, message}``."""

    @property
    def message(self):
        return self.description


class ValidationError(DomainError, BadRequest):
    """Malformed or missing input, reported as a list of field messages."""

    def __init__(self, errors: list[dict]):
        super().__init__("Request validation failed.")
        self.errors = errors

    @property
    def message(self):
        return self.errors

    @classmethod
    def single(cls, param: str, msg: str) -> "ValidationError":
        return cls([{"param": param, "msg": msg}])


class EmailInUse(DomainError, Conflict):
    def __init__(self, description: str = "Email address already in use!"):
        super().__init__(description)


class UserNotFound(DomainError, NotFound):
    def __init__(self, description: str = "User does not exist!"):
        super().__init__(description)


class ItemNotFound(DomainError, NotFound):
    def __init__(self, description: str = "Item not found!"):
        super().__init__(description)


class TokenNotFound(DomainError, NotFound):
    def __init__(self, description: str = "verification token not found"):
        super().__init__(description)


class InvalidCredentials(DomainError, Unauthorized):
    def __init__(self, description: str = "Incorrect email or password!"):
        super().__init__(description)


class SessionRequired(DomainError, Unauthorized):
    """Missing, malformed or expired session token."""


class NotOwner(DomainError, Forbidden):
    def __init__(self, description: str = "You are not allowed to update this item!"):
        super().__init__(description)


class InvalidReference(DomainError, BadRequest):
    def __init__(self, description: str = "Invalid item ID!"):
        super().__init__(description)


class InsufficientStock(DomainError, Conflict):
    def __init__(
        self,
        description: str = "This item is not available for requested quantity",
    ):
        super().__init__(description)


class MailDeliveryError(DomainError, BadGateway):
    def __init__(self, description: str = "Verification email could not be sent."):
        super().__init__(description)
