"""Page / page-size resolution for list endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Pagination:
    """Resolved pagination. `skip` and `take` are derived, never stored."""

    page: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size


def _positive_int(value: Any) -> Optional[int]:
    """Return *value* as a positive int, or None when it is missing or malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    elif not isinstance(value, int):
        return None
    return value if value > 0 else None


def resolve_pagination(
    page: Any,
    page_size: Any,
    *,
    default_page: int = DEFAULT_PAGE,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> Pagination:
    """Resolve raw page inputs, falling back to the defaults.

    No upper bound is applied to the page size here; capping is the
    integrating service's decision.
    """
    resolved_page = _positive_int(page)
    resolved_size = _positive_int(page_size)
    return Pagination(
        page=resolved_page if resolved_page is not None else default_page,
        page_size=resolved_size if resolved_size is not None else default_page_size,
    )
