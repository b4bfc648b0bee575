"""Filter extraction from a flat list request.

Two variants share one drop rule (None and "" are dropped; 0 and False
are kept):

  extract_filters        skips the reserved keys page / pageSize / sort
  extract_filters_only   skips nothing; for endpoints with no pagination
                         or sorting, so a `page` field IS a filter there

Values are passed through unmodified. An optional allow-list closes the
set of filter names an endpoint accepts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, overload

from listquery.core.exceptions import FilterNotAllowedError
from listquery.core.types import RESERVED_KEYS, FilterKind, FilterValue, QueryRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Filter:
    """One named equality constraint.

    Values are not checked against the String / Number / Boolean / Date
    union when a filter is built; only reading `kind` enforces the tag and
    raises `TypeError` for anything else.
    """

    name: str
    value: FilterValue

    @property
    def kind(self) -> FilterKind:
        return FilterKind.of(self.value)


class FilterSet(Sequence[Filter]):
    """Immutable, ordered sequence of filters in request order."""

    __slots__ = ("_filters",)

    def __init__(self, filters: Iterable[Filter] = ()):
        self._filters = tuple(filters)

    @classmethod
    def from_mapping(cls, values: Mapping[str, FilterValue]) -> FilterSet:
        return cls(Filter(name, value) for name, value in values.items())

    @overload
    def __getitem__(self, index: int) -> Filter: ...

    @overload
    def __getitem__(self, index: slice) -> FilterSet: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FilterSet(self._filters[index])
        return self._filters[index]

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __contains__(self, item: object) -> bool:
        """`"name" in filters` tests by field name; a `Filter` tests by equality."""
        if isinstance(item, str):
            return any(f.name == item for f in self._filters)
        return item in self._filters

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterSet):
            return self._filters == other._filters
        if isinstance(other, Mapping):
            return self.as_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilterSet({self.as_dict()!r})"

    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self._filters)

    def get(self, name: str, default: Any = None) -> Any:
        for f in reversed(self._filters):
            if f.name == name:
                return f.value
        return default

    def as_dict(self) -> dict[str, FilterValue]:
        return {f.name: f.value for f in self._filters}

    def restrict(self, allowed: Iterable[str]) -> FilterSet:
        """Return self if every filter name is in *allowed*, else raise."""
        permitted = frozenset(allowed)
        rejected = [f.name for f in self._filters if f.name not in permitted]
        if rejected:
            raise FilterNotAllowedError(rejected)
        return self


def _is_present(value: Any) -> bool:
    return value is not None and not (isinstance(value, str) and value == "")


def _collect(
    query: QueryRequest,
    skip: frozenset[str],
    allowed: Optional[Iterable[str]],
) -> FilterSet:
    filters = FilterSet(
        Filter(name, value)
        for name, value in query.items()
        if name not in skip and _is_present(value)
    )
    if allowed is not None:
        filters = filters.restrict(allowed)
    logger.debug("Extracted filters: %s", filters.names())
    return filters


def extract_filters(query: QueryRequest, *, allowed: Optional[Iterable[str]] = None) -> FilterSet:
    """Every non-empty field of *query* except page, pageSize and sort."""
    return _collect(query, RESERVED_KEYS, allowed)


def extract_filters_only(
    query: QueryRequest, *, allowed: Optional[Iterable[str]] = None
) -> FilterSet:
    """Every non-empty field of *query*; reserved names are not excluded."""
    return _collect(query, frozenset(), allowed)
