"""Base entity types shared by every persisted model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class BaseModel(Protocol):
    """What every entity handled by a repository must provide."""

    id: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    deleted_at: Optional[datetime]
    version: int


@dataclass
class BaseEntity:
    """Common fields of all domain entities.

    ``deleted_at`` is ``None`` unless the entity has been soft-deleted;
    ``version`` supports optimistic locking.
    """

    id: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    version: int = 0

    def is_deleted(self) -> bool:
        """Return True if the entity carries a soft-deletion timestamp."""
        return self.deleted_at is not None


@dataclass
class AuditableEntity(BaseEntity):
    """A base entity that also records who created and last changed it."""

    created_by: int = 0
    updated_by: int = 0
    audit_note: str = ""