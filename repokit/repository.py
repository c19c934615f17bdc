"""Repository contract and a repository that delegates to a unit of work."""

from __future__ import annotations

from typing import Generic, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from .entities import BaseModel
from .identifier import Identifier
from .query_params import QueryParams

T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class Repository(Protocol[T]):
    """Operations a repository offers for one entity type.

    Failures are reported by raising, typically one of the errors in
    :mod:`repokit.errors`.
    """

    def find_all(self) -> list[T]: ...

    def find_all_with_pagination(self, params: QueryParams[T]) -> tuple[list[T], int]: ...

    def find_one(self, filter: T) -> T: ...

    def find_one_by_id(self, id: int) -> T: ...

    def find_one_by_identifier(self, identifier: Identifier) -> T: ...

    def insert(self, entity: T) -> T: ...

    def update(self, identifier: Identifier, entity: T) -> T: ...

    def delete(self, identifier: Identifier) -> None: ...

    def soft_delete(self, identifier: Identifier) -> T: ...

    def hard_delete(self, identifier: Identifier) -> T: ...

    def bulk_insert(self, entities: Sequence[T]) -> list[T]: ...

    def bulk_update(self, entities: Sequence[T]) -> list[T]: ...

    def bulk_soft_delete(self, identifiers: Sequence[Identifier]) -> None: ...

    def bulk_hard_delete(self, identifiers: Sequence[Identifier]) -> None: ...

    def get_trashed(self) -> list[T]: ...

    def get_trashed_with_pagination(
        self, params: QueryParams[T]
    ) -> tuple[list[T], int]: ...

    def restore(self, identifier: Identifier) -> T: ...

    def restore_all(self) -> None: ...

    def count(self, params: Optional[QueryParams[T]]) -> int: ...

    def exists(self, identifier: Identifier) -> bool: ...


class BaseRepository(Generic[T]):
    """A repository that hands every operation to a unit of work.

    The unit of work offers the same operations as :class:`Repository`;
    results and exceptions pass through unchanged.
    """

    def __init__(self, unit_of_work: Repository[T]) -> None:
        self._uow = unit_of_work

    def find_all(self) -> list[T]:
        """Return all live entities."""
        return self._uow.find_all()

    def find_all_with_pagination(self, params: QueryParams[T]) -> tuple[list[T], int]:
        """Return one page of entities and the total count."""
        return self._uow.find_all_with_pagination(params)

    def find_one(self, filter: T) -> T:
        """Return the entity matching the example ``filter``."""
        return self._uow.find_one(filter)

    def find_one_by_id(self, id: int) -> T:
        """Return the entity with the given ID."""
        return self._uow.find_one_by_id(id)

    def find_one_by_identifier(self, identifier: Identifier) -> T:
        """Return the entity matching ``identifier``."""
        return self._uow.find_one_by_identifier(identifier)

    def insert(self, entity: T) -> T:
        """Create ``entity`` and return it with generated fields filled."""
        return self._uow.insert(entity)

    def update(self, identifier: Identifier, entity: T) -> T:
        """Update entities matching ``identifier`` with the data of ``entity``."""
        return self._uow.update(identifier, entity)

    def delete(self, identifier: Identifier) -> None:
        """Delete entities matching ``identifier`` (soft delete by default)."""
        self._uow.delete(identifier)

    def soft_delete(self, identifier: Identifier) -> T:
        """Mark matching entities as deleted."""
        return self._uow.soft_delete(identifier)

    def hard_delete(self, identifier: Identifier) -> T:
        """Remove matching entities permanently."""
        return self._uow.hard_delete(identifier)

    def bulk_insert(self, entities: Sequence[T]) -> list[T]:
        """Create several entities in one operation."""
        return self._uow.bulk_insert(entities)

    def bulk_update(self, entities: Sequence[T]) -> list[T]:
        """Update several entities in one operation."""
        return self._uow.bulk_update(entities)

    def bulk_soft_delete(self, identifiers: Sequence[Identifier]) -> None:
        """Soft-delete the entities matched by each identifier."""
        self._uow.bulk_soft_delete(identifiers)

    def bulk_hard_delete(self, identifiers: Sequence[Identifier]) -> None:
        """Permanently remove the entities matched by each identifier."""
        self._uow.bulk_hard_delete(identifiers)

    def get_trashed(self) -> list[T]:
        """Return all soft-deleted entities."""
        return self._uow.get_trashed()

    def get_trashed_with_pagination(
        self, params: QueryParams[T]
    ) -> tuple[list[T], int]:
        """Return one page of soft-deleted entities and their total count."""
        return self._uow.get_trashed_with_pagination(params)

    def restore(self, identifier: Identifier) -> T:
        """Clear the deletion mark of matching entities."""
        return self._uow.restore(identifier)

    def restore_all(self) -> None:
        """Restore every soft-deleted entity."""
        self._uow.restore_all()

    def count(self, params: Optional[QueryParams[T]]) -> int:
        """Return the number of entities matching ``params``."""
        return self._uow.count(params)

    def exists(self, identifier: Identifier) -> bool:
        """Return True if any entity matches ``identifier``."""
        return self._uow.exists(identifier)