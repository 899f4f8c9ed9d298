# api/schemas/book.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class BookRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    author_name: str = Field(min_length=1, max_length=255)
    isbn: Optional[str] = Field(default=None, max_length=20)
    synopsis: Optional[str] = None
    shareable: bool = False


class BookResponse(BaseModel):
    id: int
    title: str
    author_name: str
    isbn: Optional[str] = None
    synopsis: Optional[str] = None
    owner_id: int
    shareable: bool
    archived: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BorrowedBookResponse(BaseModel):
    id: int
    book_id: int
    user_id: int
    title: str
    author_name: str
    isbn: Optional[str] = None
    returned: bool
    return_approved: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_history(cls, history) -> "BorrowedBookResponse":
        return cls(
            id=history.id,
            book_id=history.book_id,
            user_id=history.user_id,
            title=history.book.title,
            author_name=history.book.author_name,
            isbn=history.book.isbn,
            returned=history.returned,
            return_approved=history.return_approved,
            created_at=history.created_at,
        )
