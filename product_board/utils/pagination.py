"""Search filtering and page slicing for the product grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from product_board.schemas.product import Product

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def filter_products(products: Sequence[Product], term: str) -> list[Product]:
    """Case-insensitive substring match on name; an empty term keeps everything."""
    if not term:
        return list(products)
    needle = term.lower()
    return [product for product in products if needle in product.name.lower()]


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for count items, never less than 1."""
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, count: int, page_size: int) -> int:
    return min(max(1, page), total_pages(count, page_size))


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slice items[(page-1)*size : page*size].

    Pages below 1 are treated as page 1. Pages past the end are kept as-is and
    yield an empty slice, which is how the grid behaves after a search
    narrows the result set.
    """
    page = max(1, page)
    offset = (page - 1) * page_size
    return Page(
        items=list(items[offset : offset + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
        total_pages=total_pages(len(items), page_size),
    )


def iter_pages(items: Sequence[T], page_size: int):
    """Yield every page in order."""
    for number in range(1, total_pages(len(items), page_size) + 1):
        yield paginate(items, number, page_size)
