"""listquery: flat list requests in, store-agnostic query specs and paginated envelopes out."""
from listquery.core.exceptions import (
    AppException,
    FilterNotAllowedError,
    ValidationError,
    register_exception_handlers,
)
from listquery.core.filters import Filter, FilterSet, extract_filters, extract_filters_only
from listquery.core.log import configure_logging
from listquery.core.pagination import Pagination, resolve_pagination
from listquery.core.query import FilterSpec, FindOptions, QuerySpec, QuerySpecBuilder
from listquery.core.response import ListResponse, PageMeta, list_response_model, paginated
from listquery.core.sorting import SortOrder, parse_sort
from listquery.core.types import FilterKind, SortDirection

__all__ = [
    "AppException",
    "Filter",
    "FilterKind",
    "FilterNotAllowedError",
    "FilterSet",
    "FilterSpec",
    "FindOptions",
    "ListResponse",
    "PageMeta",
    "Pagination",
    "QuerySpec",
    "QuerySpecBuilder",
    "SortDirection",
    "SortOrder",
    "ValidationError",
    "configure_logging",
    "extract_filters",
    "extract_filters_only",
    "list_response_model",
    "paginated",
    "parse_sort",
    "register_exception_handlers",
    "resolve_pagination",
]
