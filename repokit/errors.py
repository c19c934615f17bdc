"""Domain errors raised by repositories and the code built on them."""

from __future__ import annotations

from typing import Any


class EntityNotFoundError(Exception):
    """An entity with the given identifier does not exist."""

    def __init__(self, entity_type: str, id: Any) -> None:
        self.entity_type = entity_type
        self.id = id
        super().__init__(f"{entity_type} with ID {id} not found")


class ValidationError(Exception):
    """A field of an entity holds a value that is not allowed."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"validation error on field '{field}': {message}")


class DuplicateEntityError(Exception):
    """An entity with the same unique value already exists."""

    def __init__(self, entity_type: str, field: str, value: Any) -> None:
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field} '{value}' already exists")


class ConcurrencyError(Exception):
    """An optimistic-locking conflict: the entity changed underneath the caller."""

    def __init__(self, entity_type: str, id: Any) -> None:
        self.entity_type = entity_type
        self.id = id
        super().__init__(
            f"concurrent modification detected for {entity_type} with ID {id}"
        )