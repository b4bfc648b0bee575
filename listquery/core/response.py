"""Paginated response envelope helpers."""


from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, create_model

from listquery.core.query import QuerySpec

T = TypeVar("T")

_RESERVED_ENVELOPE_KEYS = {"meta"}


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int


class ListResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ meta: {...}, data: [...] }`"""

    meta: PageMeta
    data: list[T]


def _check_entity_key(entity_key: str) -> None:
    if not entity_key or entity_key in _RESERVED_ENVELOPE_KEYS:
        raise ValueError(f"Invalid entity key for paginated response: {entity_key!r}")


def list_response_model(item_type: Any, entity_key: str) -> type[BaseModel]:
    """Create a response model shaped `{ meta: {...}, <entity_key>: [...] }`.

    Use as `response_model=` for endpoints that return `paginated(..., entity_key=...)`.
    """
    _check_entity_key(entity_key)
    name = f"{entity_key[:1].upper()}{entity_key[1:]}ListResponse"
    return create_model(name, meta=(PageMeta, ...), **{entity_key: (list[item_type], ...)})


def paginated(
    data: Iterable[T],
    total: int,
    spec: QuerySpec,
    entity_key: Optional[str] = None,
) -> dict:
    """Build a paginated response dict.

    `limit` echoes the requested page size, not the number of items
    returned. With *entity_key* the items go under that key instead of
    `data`, e.g. `{"meta": {...}, "transactions": [...]}`.
    """
    items = list(data)
    meta = {
        "total": total,
        "page": spec.pagination.page,
        "limit": spec.pagination.page_size,
    }
    if entity_key is None:
        return {"meta": meta, "data": items}
    _check_entity_key(entity_key)
    return {"meta": meta, entity_key: items}
