"""Exceptions raised by the memban core."""

from __future__ import annotations

from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Entity types addressed by id."""

    BOARD = "board"
    COLUMN = "column"
    CARD = "card"
    USER = "user"
    TAG = "tag"


class MembanError(Exception):
    """Base exception for memban.

    Carries an optional error code for programmatic handling and a dict of
    extra details for front ends that want more than the message.
    """

    def __init__(self, message: str, error_code: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(MembanError):
    """Raised for invalid settings."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message, error_code="CONFIG")
        self.field = field
        self.value = value


class NotFoundError(MembanError):
    """An entity referenced by id does not exist where it is required."""

    def __init__(self, kind: EntityKind, entity_id: str, where: str | None = None):
        message = f"{kind.value.capitalize()} '{entity_id}' not found"
        if where:
            message += f" in {where}"
        super().__init__(message, error_code="NOT_FOUND", details={"kind": kind.value, "id": entity_id})
        self.kind = kind
        self.entity_id = entity_id


class DuplicateIdError(MembanError):
    """An insertion collided with an id that is already stored."""

    def __init__(self, kind: EntityKind, entity_id: str):
        super().__init__(
            f"{kind.value.capitalize()} id '{entity_id}' already exists",
            error_code="DUPLICATE_ID",
            details={"kind": kind.value, "id": entity_id},
        )
        self.kind = kind
        self.entity_id = entity_id
