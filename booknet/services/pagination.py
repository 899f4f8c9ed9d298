# booknet/services/pagination.py
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from booknet.exceptions import InvalidRequestError

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass
class Page(Generic[T]):
    """One zero-based page of results."""
    content: List[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return (self.total_elements + self.size - 1) // self.size

    @property
    def first(self) -> bool:
        return self.number == 0

    @property
    def last(self) -> bool:
        return self.number >= self.total_pages - 1


def page_bounds(page: int, size: int) -> tuple[int, int]:
    """Validate a page request and return (limit, offset)"""
    if page < 0:
        raise InvalidRequestError("Page number must be zero or greater")
    if size < 1 or size > MAX_PAGE_SIZE:
        raise InvalidRequestError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")
    return size, page * size
