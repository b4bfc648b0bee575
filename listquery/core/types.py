"""Shared value types for list queries."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

# Wire names of the request fields that drive pagination and ordering.
PAGE_KEY = "page"
PAGE_SIZE_KEY = "pageSize"
SORT_KEY = "sort"

RESERVED_KEYS = frozenset({PAGE_KEY, PAGE_SIZE_KEY, SORT_KEY})

# `datetime` is a subclass of `date`, so both fit the Date variant.
FilterValue = Union[str, int, float, bool, date]

QueryRequest = Mapping[str, Any]


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_text(cls, text: Optional[str]) -> SortDirection:
        """`asc` (any case) is ascending; anything else, including nothing, is descending."""
        if text is not None and text.strip().lower() == "asc":
            return cls.ASC
        return cls.DESC


class FilterKind(str, Enum):
    """Tag of a filter value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"

    @classmethod
    def of(cls, value: Any) -> FilterKind:
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, date):
            return cls.DATE
        if isinstance(value, str):
            return cls.STRING
        raise TypeError(f"Unsupported filter value type: {type(value).__name__}")
