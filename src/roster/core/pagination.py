"""Offset pagination primitives shared by the store and the HTTP layer.

``PageRequest`` is zero-based (page 0 is the first page). ``Page`` carries the
slice of items plus the totals needed to emit pagination headers.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Literal, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Direction = Literal["asc", "desc"]

TOTAL_COUNT_HEADER = "X-Total-Count"
TOTAL_PAGES_HEADER = "X-Total-Pages"
PAGE_NUMBER_HEADER = "X-Page-Number"
PAGE_SIZE_HEADER = "X-Page-Size"

__all__ = [
    "PageRequest",
    "Page",
    "update_page_headers",
    "TOTAL_COUNT_HEADER",
    "TOTAL_PAGES_HEADER",
    "PAGE_NUMBER_HEADER",
    "PAGE_SIZE_HEADER",
]


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: tuple[tuple[str, Direction], ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("page index must not be negative")
        if self.size < 1:
            raise ValueError("page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(
        cls,
        page: int = 0,
        size: int = 20,
        sort: Iterable[str] | None = None,
        allowed: Iterable[str] | None = None,
    ) -> "PageRequest":
        """Build a request from ``field[,asc|desc]`` sort expressions.

        Raises ``ValueError`` for a malformed expression or, when ``allowed``
        is given, a field outside of it.
        """
        allowed_fields = set(allowed) if allowed is not None else None
        orders: list[tuple[str, Direction]] = []
        for expr in sort or ():
            name, _, direction = expr.partition(",")
            name = name.strip()
            direction = (direction.strip() or "asc").lower()
            if not name:
                raise ValueError(f"invalid sort expression '{expr}'")
            if direction not in ("asc", "desc"):
                raise ValueError(f"invalid sort direction '{direction}'")
            if allowed_fields is not None and name not in allowed_fields:
                raise ValueError(f"cannot sort by '{name}'")
            orders.append((name, direction))  # type: ignore[arg-type]
        return cls(page=page, size=size, sort=tuple(orders))


@dataclass
class Page(Generic[T]):
    items: Sequence[T]
    total_elements: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        return Page(
            items=[fn(item) for item in self.items],
            total_elements=self.total_elements,
            page=self.page,
            size=self.size,
        )


def update_page_headers(response, page: Page) -> None:
    """Write page totals onto anything exposing a mutable ``headers`` mapping."""
    response.headers[TOTAL_COUNT_HEADER] = str(page.total_elements)
    response.headers[TOTAL_PAGES_HEADER] = str(page.total_pages)
    response.headers[PAGE_NUMBER_HEADER] = str(page.page)
    response.headers[PAGE_SIZE_HEADER] = str(page.size)
