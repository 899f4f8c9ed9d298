# booknet/services/book_service.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from booknet.exceptions import InvalidRequestError, NotFoundError
from booknet.identity import ActingUser
from booknet.sa.models import Book, BookTransactionHistory
from booknet.sa.repositories.book import BookRepository
from booknet.sa.repositories.history import TransactionHistoryRepository
from .pagination import Page, page_bounds

logger = logging.getLogger(__name__)


class BookService:
    def __init__(self, session: Session):
        self.books = BookRepository(session)
        self.ledger = TransactionHistoryRepository(session)

    def save_book(
        self,
        acting_user: ActingUser,
        title: str,
        author_name: str,
        isbn: Optional[str] = None,
        synopsis: Optional[str] = None,
        shareable: bool = False
    ) -> int:
        """Upload a book owned by the acting user and return its ID"""
        if not title or not title.strip():
            raise InvalidRequestError("Book title is required")
        if not author_name or not author_name.strip():
            raise InvalidRequestError("Book author name is required")

        book = Book(
            title=title.strip(),
            author_name=author_name.strip(),
            isbn=isbn,
            synopsis=synopsis,
            shareable=shareable,
            archived=False,
            owner_id=acting_user.id
        )
        book = self.books.save(book)
        logger.info("User %s uploaded book %s", acting_user.id, book.id)
        return book.id

    def find_by_id(self, book_id: int) -> Book:
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError(f"No book found with ID: {book_id}")
        return book

    def find_all_books(self, page: int, size: int, acting_user: ActingUser) -> Page[Book]:
        """Books the acting user could borrow, newest first"""
        limit, offset = page_bounds(page, size)
        return Page(
            content=self.books.get_displayable_books(acting_user.id, limit=limit, offset=offset),
            number=page,
            size=size,
            total_elements=self.books.count_displayable_books(acting_user.id)
        )

    def find_all_books_by_owner(self, page: int, size: int, acting_user: ActingUser) -> Page[Book]:
        limit, offset = page_bounds(page, size)
        return Page(
            content=self.books.get_books_by_owner(acting_user.id, limit=limit, offset=offset),
            number=page,
            size=size,
            total_elements=self.books.count_books_by_owner(acting_user.id)
        )

    def find_all_borrowed_books(self, page: int, size: int, acting_user: ActingUser) -> Page[BookTransactionHistory]:
        """Ledger records where the acting user is the borrower"""
        limit, offset = page_bounds(page, size)
        return Page(
            content=self.ledger.get_borrowed_books(acting_user.id, limit=limit, offset=offset),
            number=page,
            size=size,
            total_elements=self.ledger.count_borrowed_books(acting_user.id)
        )

    def find_all_returned_books(self, page: int, size: int, acting_user: ActingUser) -> Page[BookTransactionHistory]:
        """Ledger records for books the acting user owns"""
        limit, offset = page_bounds(page, size)
        return Page(
            content=self.ledger.get_returned_books(acting_user.id, limit=limit, offset=offset),
            number=page,
            size=size,
            total_elements=self.ledger.count_returned_books(acting_user.id)
        )
