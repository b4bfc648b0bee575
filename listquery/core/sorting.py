"""Sort-string parsing: `"field:asc,other:desc"` -> ordered field/direction mapping."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

from listquery.core.types import SortDirection

logger = logging.getLogger(__name__)

DEFAULT_SORT_FIELD = "createdAt"


class SortOrder(Mapping[str, SortDirection]):
    """Read-only field -> direction mapping, in the order fields were first seen.

    Built by field name, so a repeated field keeps its first position but
    takes the direction of its last occurrence.
    """

    __slots__ = ("_items",)

    def __init__(
        self,
        items: Union[Mapping[str, SortDirection], Iterable[Tuple[str, SortDirection]]] = (),
    ):
        self._items: dict[str, SortDirection] = dict(items)

    def __getitem__(self, field: str) -> SortDirection:
        return self._items[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SortOrder({self.to_dict()!r})"

    def to_dict(self) -> dict[str, str]:
        """Wire form for the persistence layer: `{"field": "ASC" | "DESC"}`."""
        return {field: direction.value for field, direction in self._items.items()}

    def to_sort_string(self) -> str:
        return ",".join(
            f"{field}:{direction.value.lower()}" for field, direction in self._items.items()
        )


def default_order(field: str = DEFAULT_SORT_FIELD) -> SortOrder:
    return SortOrder({field: SortDirection.DESC})


def parse_sort(sort: Any, *, default_field: str = DEFAULT_SORT_FIELD) -> SortOrder:
    """Parse a comma-separated sort string into a :class:`SortOrder`.

    Each token is `field` or `field:direction`. Only `asc` (case-insensitive)
    sorts ascending; any other direction, or none at all, sorts descending.
    Tokens with an empty field name are skipped. A missing, blank or
    entirely malformed sort string yields `{default_field: DESC}`.

    >>> parse_sort("incomeReceived:asc,status").to_dict()
    {'incomeReceived': 'ASC', 'status': 'DESC'}
    """
    if not isinstance(sort, str) or not sort.strip():
        return default_order(default_field)

    order: dict[str, SortDirection] = {}
    for token in sort.split(","):
        field, sep, rest = token.strip().partition(":")
        field = field.strip()
        if not field:
            logger.debug("Skipping sort token without field name: %r", token)
            continue
        direction = rest.split(":", 1)[0] if sep else None
        order[field] = SortDirection.from_text(direction)

    if not order:
        return default_order(default_field)
    return SortOrder(order)
