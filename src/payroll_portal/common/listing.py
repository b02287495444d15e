"""Search, sort and page helpers for the HTML tables.

The backend returns whole collections for most entities, so filtering and
paging happen here, after enrichment.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageSlice(Generic[T]):
    items: list[T]
    page: int
    total_pages: int
    total: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def resolve_path(obj: Any, path: str) -> Any:
    """Follow a dotted path ("employee.user.lastname") through attributes or keys."""
    current = obj
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, dict):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
    return current


def search(items: Iterable[T], term: Optional[str], fields: Sequence[str]) -> list[T]:
    if not term:
        return list(items)
    needle = term.strip().lower()
    out = []
    for item in items:
        haystack = " ".join(str(resolve_path(item, f) or "") for f in fields).lower()
        if needle in haystack:
            out.append(item)
    return out


def sort_by(items: Iterable[T], key: Optional[str], direction: str = "asc") -> list[T]:
    """Sort on a dotted path; strings compare case-insensitively, missing values sort as empty/zero."""
    rows = list(items)
    if not key:
        return rows

    def _key(item: T):
        value = resolve_path(item, key)
        if value is None:
            return (0, "")
        if isinstance(value, str):
            return (0, value.lower())
        return (1, value)

    return sorted(rows, key=_key, reverse=(direction == "desc"))


def paginate(items: Sequence[T], page: int, per_page: int) -> PageSlice[T]:
    total = len(items)
    total_pages = max(1, math.ceil(total / per_page)) if per_page > 0 else 1
    page = min(max(1, page), total_pages)
    start = (page - 1) * per_page
    return PageSlice(items=list(items[start:start + per_page]), page=page, total_pages=total_pages, total=total)


def build_table(
    items: Iterable[T],
    *,
    term: Optional[str],
    search_fields: Sequence[str],
    sort_key: Optional[str],
    direction: str,
    allowed_sort_keys: Sequence[str],
    page: int,
    per_page: int,
) -> PageSlice[T]:
    rows = search(items, term, search_fields)
    if sort_key in allowed_sort_keys:
        rows = sort_by(rows, sort_key, direction)
    return paginate(rows, page, per_page)
