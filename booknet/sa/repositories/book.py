# booknet/sa/repositories/book.py
from typing import Optional, List
from sqlalchemy import desc
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from booknet.exceptions import NotFoundError, InvalidRequestError
from ..models import Book, User

class BookRepository:
    """Catalog store for Book entities."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by its ID"""
        return self.session.query(Book).filter(Book.id == book_id).first()

    def save(self, book: Book) -> Book:
        """Insert or update a book and commit.

        Args:
            book: The Book to persist

        Returns:
            The persisted Book with its ID populated

        Raises:
            NotFoundError: If the owner does not exist
            InvalidRequestError: If the book violates another constraint
        """
        owner_id = book.owner_id
        self.session.add(book)
        try:
            self.session.commit()
            return book
        except IntegrityError as e:
            self.session.rollback()
            if self.session.query(User).filter(User.id == owner_id).first() is None:
                raise NotFoundError(f"No user found with ID: {owner_id}")
            raise InvalidRequestError(f"Book could not be saved: {e.orig}")

    def _displayable_query(self, user_id: int):
        return self.session.query(Book).filter(
            Book.archived.is_(False),
            Book.shareable.is_(True),
            Book.owner_id != user_id
        )

    def get_displayable_books(self, user_id: int, limit: int = 10, offset: int = 0) -> List[Book]:
        """Get books another user may borrow, newest first.

        Args:
            user_id: The viewing user, whose own books are excluded
            limit: Maximum number of books to return
            offset: Number of books to skip

        Returns:
            Shareable, non-archived books not owned by user_id
        """
        return (
            self._displayable_query(user_id)
            .order_by(desc(Book.created_at), desc(Book.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_displayable_books(self, user_id: int) -> int:
        return self._displayable_query(user_id).count()

    def get_books_by_owner(self, owner_id: int, limit: int = 10, offset: int = 0) -> List[Book]:
        """Get all books owned by a user, newest first"""
        return (
            self.session.query(Book)
            .filter(Book.owner_id == owner_id)
            .order_by(desc(Book.created_at), desc(Book.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_books_by_owner(self, owner_id: int) -> int:
        return self.session.query(Book).filter(Book.owner_id == owner_id).count()
