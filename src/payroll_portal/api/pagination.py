from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from ..core.exceptions import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a Laravel-style paginated collection."""

    data: list[T] = field(default_factory=list)
    current_page: int = 1
    last_page: int = 1
    per_page: int = 10
    total: int = 0

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        *,
        key: Optional[str] = None,
        item: Callable[[dict], T] = lambda d: d,  # type: ignore[assignment,return-value]
    ) -> "Page[T]":
        body = payload.get(key) if key and isinstance(payload, dict) else payload
        if not isinstance(body, dict):
            raise ApiError("Invalid paginated response", status=200)

        raw = body.get("data")
        if not isinstance(raw, list):
            raise ApiError("Invalid paginated response: 'data' is not a list", status=200)

        return cls(
            data=[item(d) for d in raw],
            current_page=int(body.get("current_page") or 1),
            last_page=int(body.get("last_page") or 1),
            per_page=int(body.get("per_page") or len(raw) or 1),
            total=int(body.get("total") or len(raw)),
        )


def collect_all_pages(fetch_page: Callable[[int, int], Page[T]], per_page: int) -> list[T]:
    """Walk pages 1..last_page and concatenate their data.

    The first page is always requested; `last_page` is re-read from every
    response so a collection that grows while paging is still covered.
    """
    items: list[T] = []
    page = 1
    last_page = 1
    while True:
        result = fetch_page(page, per_page)
        items.extend(result.data)
        last_page = result.last_page
        page += 1
        if page > last_page:
            break
    return items
