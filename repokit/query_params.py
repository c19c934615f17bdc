"""Pagination, filtering, sorting and visibility options for queries."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field, replace
from typing import Generic, Iterable, Optional, TypeVar

from .criteria import FilterCriteria
from .entities import BaseModel
from .identifier import Identifier
from .sorting import SortField, SortOrder

T = TypeVar("T", bound=BaseModel)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


@dataclass
class QueryParams(Generic[T]):
    """Options for a paginated repository query.

    ``offset`` and ``limit`` are derived from ``page`` and ``page_size`` by
    :meth:`prepare_defaults`. The chaining methods change the instance in
    place and return it.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    offset: int = 0
    limit: int = 0
    search: str = ""
    sort: Optional[list[SortField]] = dc_field(default_factory=list)
    filters: Optional[list[FilterCriteria]] = dc_field(default_factory=list)
    include_deleted: bool = False
    only_deleted: bool = False
    preloads: Optional[list[str]] = dc_field(default_factory=list)

    def prepare_defaults(self) -> QueryParams[T]:
        """Clamp paging values, compute offset and limit, fill empty lists."""
        if self.page < 1:
            self.page = 1
        if self.page_size <= 0:
            self.page_size = DEFAULT_PAGE_SIZE
        if self.page_size > MAX_PAGE_SIZE:
            self.page_size = MAX_PAGE_SIZE

        self.offset = (self.page - 1) * self.page_size
        self.limit = self.page_size

        if self.sort is None:
            self.sort = []
        if self.filters is None:
            self.filters = []
        if self.preloads is None:
            self.preloads = []
        return self

    def with_filters(self, identifier: Optional[Identifier]) -> QueryParams[T]:
        """Replace the filters with the conditions of ``identifier``, if given."""
        if identifier is not None:
            self.filters = identifier.to_filter_criteria()
        return self

    def add_sort(self, field: str, order: SortOrder) -> QueryParams[T]:
        """Append a sort field."""
        if self.sort is None:
            self.sort = []
        self.sort.append(SortField(field=field, order=order))
        return self

    def add_sort_asc(self, field: str) -> QueryParams[T]:
        """Append an ascending sort field."""
        return self.add_sort(field, SortOrder.ASC)

    def add_sort_desc(self, field: str) -> QueryParams[T]:
        """Append a descending sort field."""
        return self.add_sort(field, SortOrder.DESC)

    def clear_sort(self) -> QueryParams[T]:
        """Remove all sort fields."""
        self.sort = []
        return self

    def with_search(self, search_term: str) -> QueryParams[T]:
        """Set the free-text search term."""
        self.search = search_term
        return self

    def with_preloads(self, preloads: Optional[Iterable[str]]) -> QueryParams[T]:
        """Replace the relations to preload."""
        self.preloads = list(preloads) if preloads is not None else None
        return self

    def add_preload(self, preload: str) -> QueryParams[T]:
        """Append a relation to preload."""
        if self.preloads is None:
            self.preloads = []
        self.preloads.append(preload)
        return self

    def with_deleted_visibility(
        self, include_deleted: bool, only_deleted: bool
    ) -> QueryParams[T]:
        """Set both soft-delete visibility flags."""
        self.include_deleted = include_deleted
        self.only_deleted = only_deleted
        return self

    def include_deleted_records(self) -> QueryParams[T]:
        """Show soft-deleted records alongside live ones."""
        return self.with_deleted_visibility(True, False)

    def only_deleted_records(self) -> QueryParams[T]:
        """Show only soft-deleted records."""
        return self.with_deleted_visibility(False, True)

    def exclude_deleted_records(self) -> QueryParams[T]:
        """Hide soft-deleted records (the default)."""
        return self.with_deleted_visibility(False, False)

    def has_search(self) -> bool:
        """Return True if a search term is set."""
        return self.search != ""

    def has_filters(self) -> bool:
        """Return True if any filters are set."""
        return bool(self.filters)

    def has_sort(self) -> bool:
        """Return True if any sort fields are set."""
        return bool(self.sort)

    def has_preloads(self) -> bool:
        """Return True if any preload relations are set."""
        return bool(self.preloads)

    def clone(self) -> QueryParams[T]:
        """Return an independent copy; ``None`` lists stay ``None``."""
        return QueryParams(
            page=self.page,
            page_size=self.page_size,
            offset=self.offset,
            limit=self.limit,
            search=self.search,
            sort=[replace(item) for item in self.sort] if self.sort is not None else None,
            filters=(
                [
                    replace(
                        item,
                        values=list(item.values) if item.values is not None else None,
                    )
                    for item in self.filters
                ]
                if self.filters is not None
                else None
            ),
            include_deleted=self.include_deleted,
            only_deleted=self.only_deleted,
            preloads=list(self.preloads) if self.preloads is not None else None,
        )