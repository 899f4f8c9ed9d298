# api/schemas/common.py
from typing import Generic, List, TypeVar
from pydantic import BaseModel

DataT = TypeVar("DataT")


class PageResponse(BaseModel, Generic[DataT]):
    """
    Generic schema for paginated API responses. Pages are zero-based.
    """
    content: List[DataT]
    number: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page) -> "PageResponse[DataT]":
        return cls(
            content=page.content,
            number=page.number,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.first,
            last=page.last,
        )


class IdResponse(BaseModel):
    id: int


class StatusResponse(BaseModel):
    value: bool
