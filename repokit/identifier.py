"""Fluent, immutable builder for filter conditions."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Iterator, Optional

from .criteria import FilterCriteria
from .operators import FilterOperator, LogicalOperator


class Identifier:
    """An immutable chain of filter conditions.

    Every building method returns a new instance and leaves the receiver
    unchanged, so one identifier can be shared freely between threads.
    """

    __slots__ = ("_criteria",)

    def __init__(self, criteria: Iterable[FilterCriteria] = ()) -> None:
        self._criteria: tuple[FilterCriteria, ...] = tuple(
            replace(item) for item in criteria
        )

    def _with(self, criteria: FilterCriteria) -> Identifier:
        return Identifier((*self._criteria, criteria))

    def _add(
        self,
        field: str,
        operator: FilterOperator,
        value: Any = None,
        values: Optional[list[Any]] = None,
    ) -> Identifier:
        return self._with(
            FilterCriteria(field=field, operator=operator, value=value, values=values)
        )

    def equal(self, field: str, value: Any) -> Identifier:
        """Add an equality condition."""
        return self._add(field, FilterOperator.EQUAL, value)

    def not_equal(self, field: str, value: Any) -> Identifier:
        """Add a non-equality condition."""
        return self._add(field, FilterOperator.NOT_EQUAL, value)

    def greater_than(self, field: str, value: Any) -> Identifier:
        """Add a greater-than condition."""
        return self._add(field, FilterOperator.GREATER_THAN, value)

    def greater_or_equal(self, field: str, value: Any) -> Identifier:
        """Add a greater-than-or-equal condition."""
        return self._add(field, FilterOperator.GREATER_EQUAL, value)

    def less_than(self, field: str, value: Any) -> Identifier:
        """Add a less-than condition."""
        return self._add(field, FilterOperator.LESS_THAN, value)

    def less_or_equal(self, field: str, value: Any) -> Identifier:
        """Add a less-than-or-equal condition."""
        return self._add(field, FilterOperator.LESS_EQUAL, value)

    def like(self, field: str, pattern: str) -> Identifier:
        """Add a pattern-matching condition (SQL LIKE)."""
        return self._add(field, FilterOperator.LIKE, pattern)

    def in_(self, field: str, values: Iterable[Any]) -> Identifier:
        """Add a condition that the field is one of ``values``."""
        return self._add(field, FilterOperator.IN, values=list(values))

    def not_in(self, field: str, values: Iterable[Any]) -> Identifier:
        """Add a condition that the field is none of ``values``."""
        return self._add(field, FilterOperator.NOT_IN, values=list(values))

    def between(self, field: str, start: Any, end: Any) -> Identifier:
        """Add a range condition from ``start`` to ``end``."""
        return self._add(field, FilterOperator.BETWEEN, values=[start, end])

    def is_null(self, field: str) -> Identifier:
        """Add a condition that the field is NULL."""
        return self._add(field, FilterOperator.IS_NULL)

    def is_not_null(self, field: str) -> Identifier:
        """Add a condition that the field is not NULL."""
        return self._add(field, FilterOperator.IS_NOT_NULL)

    def contains(self, field: str, value: Any) -> Identifier:
        """Add a JSON or array containment condition."""
        return self._add(field, FilterOperator.CONTAINS, value)

    def has(self, field: str) -> Identifier:
        """Add a condition that the (JSON) field exists."""
        return self._add(field, FilterOperator.HAS)

    def _combine(
        self, other: Optional[Identifier], logical_op: LogicalOperator
    ) -> Identifier:
        if other is None:
            return self
        other_criteria = other.to_filter_criteria()
        own = list(self._criteria)
        if own and other_criteria:
            own[-1] = replace(own[-1], logical_op=logical_op)
        return Identifier(own + other_criteria)

    def and_(self, other: Optional[Identifier]) -> Identifier:
        """Append the conditions of ``other``, joined with AND."""
        return self._combine(other, LogicalOperator.AND)

    def or_(self, other: Optional[Identifier]) -> Identifier:
        """Append the conditions of ``other``, joined with OR."""
        return self._combine(other, LogicalOperator.OR)

    def to_filter_criteria(self) -> list[FilterCriteria]:
        """Return copies of the accumulated conditions, in order."""
        return [
            replace(item, values=list(item.values) if item.values is not None else None)
            for item in self._criteria
        ]

    def reset(self) -> Identifier:
        """Return a fresh identifier with no conditions."""
        return Identifier()

    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[FilterCriteria]:
        return iter(self.to_filter_criteria())

    def __repr__(self) -> str:
        return f"Identifier({list(self._criteria)!r})"