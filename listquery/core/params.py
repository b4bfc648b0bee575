"""FastAPI dependencies that decode list requests into query specs.

Usage:

    list_bots_query = query_spec_dependency(allowed_filters={"status", "type"})

    @router.get("/bots")
    async def list_bots(spec: QuerySpec = Depends(list_bots_query)):
        ...
"""

from typing import Any, Callable, Iterable, Optional

from fastapi import Depends, Query, Request

from listquery.core.query import FilterSpec, QuerySpec, QuerySpecBuilder
from listquery.core.types import PAGE_KEY, PAGE_SIZE_KEY, RESERVED_KEYS, SORT_KEY


class ListQueryParams:
    """FastAPI dependency for `?page=1&pageSize=10&sort=field:asc,other:desc&<filter>=<value>`.

    `page` and `pageSize` are validated here (positive integers); every
    other query parameter is collected as a filter candidate. For repeated
    parameters the last value wins.
    """

    def __init__(
        self,
        request: Request,
        page: Optional[int] = Query(default=None, ge=1, description="Page number (1-based)"),
        page_size: Optional[int] = Query(
            default=None, ge=1, alias=PAGE_SIZE_KEY, description="Items per page"
        ),
        sort: Optional[str] = Query(
            default=None, description="Sort fields, e.g. `createdAt:desc,status:asc`"
        ),
    ):
        self.page = page
        self.page_size = page_size
        self.sort = sort
        self.extra: dict[str, str] = {
            key: value
            for key, value in request.query_params.items()
            if key not in RESERVED_KEYS
        }

    @property
    def query(self) -> dict[str, Any]:
        return {
            PAGE_KEY: self.page,
            PAGE_SIZE_KEY: self.page_size,
            SORT_KEY: self.sort,
            **self.extra,
        }


def _builder_for(
    allowed_filters: Optional[Iterable[str]],
    builder: Optional[QuerySpecBuilder],
) -> QuerySpecBuilder:
    if builder is not None:
        if allowed_filters is not None:
            raise ValueError("Pass allowed_filters or builder, not both")
        return builder
    return QuerySpecBuilder.from_settings(allowed_filters=allowed_filters)


def query_spec_dependency(
    *,
    allowed_filters: Optional[Iterable[str]] = None,
    builder: Optional[QuerySpecBuilder] = None,
) -> Callable[..., QuerySpec]:
    """Return a dependency that yields the request's :class:`QuerySpec`."""
    spec_builder = _builder_for(allowed_filters, builder)

    def dependency(params: ListQueryParams = Depends()) -> QuerySpec:
        return spec_builder.build(params.query)

    return dependency


def filter_spec_dependency(
    *,
    allowed_filters: Optional[Iterable[str]] = None,
    builder: Optional[QuerySpecBuilder] = None,
) -> Callable[..., FilterSpec]:
    """Return a dependency that yields a :class:`FilterSpec` of ALL query parameters."""
    spec_builder = _builder_for(allowed_filters, builder)

    def dependency(request: Request) -> FilterSpec:
        return spec_builder.build_filters_only(dict(request.query_params.items()))

    return dependency
