"""A single, storage-agnostic filter condition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .operators import FilterOperator, LogicalOperator


@dataclass
class FilterCriteria:
    """One filter condition.

    ``value`` holds the operand of single-value operators, ``values`` the
    operands of IN, NOT_IN and BETWEEN. ``logical_op`` says how this
    condition combines with the next one. When ``group`` is non-empty it
    holds nested conditions and the other fields are ignored.
    """

    field: str = ""
    operator: Optional[FilterOperator] = None
    value: Any = None
    values: Optional[list[Any]] = None
    logical_op: Optional[LogicalOperator] = None
    group: Optional[list[FilterCriteria]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; empty optional fields are left out."""
        data: dict[str, Any] = {
            "field": self.field,
            "operator": self.operator.value if self.operator is not None else "",
        }
        if self.value is not None:
            data["value"] = self.value
        if self.values:
            data["values"] = list(self.values)
        if self.logical_op is not None:
            data["logicalOp"] = self.logical_op.value
        if self.group:
            data["group"] = [item.to_dict() for item in self.group]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilterCriteria:
        """Build criteria from a mapping as produced by :meth:`to_dict`.

        Raises ValueError for an unknown operator or logical operator.
        """
        operator = data.get("operator") or None
        logical_op = data.get("logicalOp") or None
        values = data.get("values")
        group = data.get("group")
        return cls(
            field=data.get("field", ""),
            operator=FilterOperator(operator) if operator is not None else None,
            value=data.get("value"),
            values=list(values) if values is not None else None,
            logical_op=LogicalOperator(logical_op) if logical_op is not None else None,
            group=[cls.from_dict(item) for item in group] if group else None,
        )