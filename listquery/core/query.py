"""Query spec builder: composes pagination, sorting and filtering per request.

Rule: enforced constraints (e.g. "rows must belong to the requesting
user") are merged into `where` AFTER client filters, so a client can never
override them with a same-named query field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from listquery.core.config import Settings, settings as default_settings
from listquery.core.filters import FilterSet, extract_filters, extract_filters_only
from listquery.core.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    Pagination,
    resolve_pagination,
)
from listquery.core.sorting import DEFAULT_SORT_FIELD, SortOrder, parse_sort
from listquery.core.types import PAGE_KEY, PAGE_SIZE_KEY, SORT_KEY, QueryRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuerySpec:
    """Everything a list query needs; built once per request."""

    pagination: Pagination
    order: SortOrder
    filters: FilterSet = field(default_factory=FilterSet)

    @property
    def sort(self) -> str:
        """Effective sort in `field:dir,...` form."""
        return self.order.to_sort_string()


@dataclass(frozen=True)
class FilterSpec:
    """Filters for endpoints without pagination or sorting (summaries, totals)."""

    filters: FilterSet = field(default_factory=FilterSet)


@dataclass(frozen=True)
class FindOptions:
    """Store-agnostic find options: `{skip, take, order, where}`."""

    skip: int
    take: int
    order: Mapping[str, str]
    where: Mapping[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "skip": self.skip,
            "take": self.take,
            "order": dict(self.order),
            "where": dict(self.where),
        }


class QuerySpecBuilder:
    """Build :class:`QuerySpec` objects from flat list requests.

    Defaults are per instance, so two endpoints can sort by different
    fields without touching module state.
    """

    def __init__(
        self,
        *,
        default_sort_field: str = DEFAULT_SORT_FIELD,
        default_page: int = DEFAULT_PAGE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        allowed_filters: Optional[Iterable[str]] = None,
    ):
        if not default_sort_field or not default_sort_field.strip():
            raise ValueError("default_sort_field must be a non-empty field name")
        if default_page < 1:
            raise ValueError(f"default_page must be >= 1, got {default_page}")
        if default_page_size < 1:
            raise ValueError(f"default_page_size must be >= 1, got {default_page_size}")
        self.default_sort_field = default_sort_field
        self.default_page = default_page
        self.default_page_size = default_page_size
        self.allowed_filters = (
            frozenset(allowed_filters) if allowed_filters is not None else None
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        allowed_filters: Optional[Iterable[str]] = None,
    ) -> QuerySpecBuilder:
        settings = settings or default_settings
        return cls(
            default_sort_field=settings.default_sort_field,
            default_page=settings.default_page,
            default_page_size=settings.default_page_size,
            allowed_filters=allowed_filters,
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _pagination(self, query: QueryRequest) -> Pagination:
        return resolve_pagination(
            query.get(PAGE_KEY),
            query.get(PAGE_SIZE_KEY),
            default_page=self.default_page,
            default_page_size=self.default_page_size,
        )

    def _order(self, query: QueryRequest) -> SortOrder:
        return parse_sort(query.get(SORT_KEY), default_field=self.default_sort_field)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def build(self, query: QueryRequest) -> QuerySpec:
        """Pagination + order + filters (reserved keys excluded).

        >>> spec = QuerySpecBuilder().build({"page": 1, "sort": "status:asc", "status": "active"})
        >>> spec.order.to_dict(), spec.filters.as_dict(), spec.pagination.skip
        ({'status': 'ASC'}, {'status': 'active'}, 0)
        """
        spec = QuerySpec(
            pagination=self._pagination(query),
            order=self._order(query),
            filters=extract_filters(query, allowed=self.allowed_filters),
        )
        logger.debug(
            "Built query spec: page=%d pageSize=%d sort=%s filters=%s",
            spec.pagination.page,
            spec.pagination.page_size,
            spec.sort,
            spec.filters.names(),
        )
        return spec

    def build_pagination_only(self, query: QueryRequest) -> QuerySpec:
        """Pagination + order; every other field of *query* is ignored."""
        return QuerySpec(pagination=self._pagination(query), order=self._order(query))

    def build_filters_only(self, query: QueryRequest) -> FilterSpec:
        """Filters only; page / pageSize / sort are treated as ordinary fields."""
        return FilterSpec(filters=extract_filters_only(query, allowed=self.allowed_filters))

    @staticmethod
    def build_where(
        filters: Union[FilterSet, Mapping[str, Any]],
        enforced: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Merge client filters with enforced constraints; enforced keys win."""
        client = filters.as_dict() if isinstance(filters, FilterSet) else dict(filters)
        if not enforced:
            return client
        overridden = sorted(k for k in enforced if k in client and client[k] != enforced[k])
        if overridden:
            logger.info("Enforced constraints override client filters: %s", overridden)
        return {**client, **enforced}

    @classmethod
    def build_find_options(
        cls,
        spec: QuerySpec,
        enforced: Optional[Mapping[str, Any]] = None,
    ) -> FindOptions:
        return FindOptions(
            skip=spec.pagination.skip,
            take=spec.pagination.take,
            order=MappingProxyType(spec.order.to_dict()),
            where=MappingProxyType(cls.build_where(spec.filters, enforced)),
        )
