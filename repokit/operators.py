"""Comparison and logical operators used in filter criteria."""

from __future__ import annotations

from enum import Enum


class FilterOperator(str, Enum):
    """The kind of comparison a filter condition performs."""

    EQUAL = "eq"
    NOT_EQUAL = "neq"
    GREATER_THAN = "gt"
    GREATER_EQUAL = "gte"
    LESS_THAN = "lt"
    LESS_EQUAL = "lte"
    LIKE = "like"
    IN = "in"
    NOT_IN = "not_in"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    BETWEEN = "between"
    CONTAINS = "contains"
    HAS = "has"

    def __str__(self) -> str:
        return self.value


class LogicalOperator(str, Enum):
    """How a filter condition combines with the one after it."""

    AND = "and"
    OR = "or"

    def __str__(self) -> str:
        return self.value