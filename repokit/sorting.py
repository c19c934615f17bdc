"""Sort directions and sort fields for repository queries."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class SortOrder(str, Enum):
    """Direction of a sort."""

    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value


@dataclass
class SortField:
    """A field to sort by and the direction to sort it in.

    ``order`` is an empty string when no direction has been given.
    """

    field: str = ""
    order: Union[SortOrder, str] = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the sort field."""
        order = self.order.value if isinstance(self.order, SortOrder) else self.order
        return {"field": self.field, "order": order}

    def to_json(self) -> str:
        """Serialise to compact JSON, e.g. ``{"field":"name","order":"asc"}``."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SortField:
        """Build a sort field from a mapping.

        Raises ValueError if the order is neither empty nor a known direction.
        """
        order = data.get("order", "") or ""
        return cls(field=data.get("field", "") or "", order=SortOrder(order) if order else "")

    @classmethod
    def from_json(cls, text: str) -> SortField:
        """Build a sort field from its JSON form."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("sort field JSON must be an object")
        return cls.from_dict(data)