# booknet/sa/repositories/history.py
from typing import Optional, List
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError
from booknet.exceptions import OperationNotPermittedError
from ..models import Book, BookTransactionHistory

ALREADY_BORROWED = "The requested book is already borrowed"

class TransactionHistoryRepository:
    """Ledger of borrow, return and approval records."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def find_active_record(self, book_id: int, user_id: int) -> Optional[BookTransactionHistory]:
        """Get the unreturned record for a book borrowed by a user.

        Args:
            book_id: The ID of the borrowed book
            user_id: The ID of the borrowing user

        Returns:
            The active record if the user currently holds the book, None otherwise
        """
        return (
            self.session.query(BookTransactionHistory)
            .filter(
                BookTransactionHistory.book_id == book_id,
                BookTransactionHistory.user_id == user_id,
                BookTransactionHistory.returned.is_(False)
            )
            .first()
        )

    def is_already_borrowed_by_user(self, book_id: int, user_id: int) -> bool:
        return self.find_active_record(book_id, user_id) is not None

    def find_returned_unapproved(self, book_id: int, owner_id: int) -> Optional[BookTransactionHistory]:
        """Get a returned record awaiting approval by the book's owner.

        Args:
            book_id: The ID of the returned book
            owner_id: The ID the book owner must match

        Returns:
            The oldest returned, unapproved record, or None
        """
        return (
            self.session.query(BookTransactionHistory)
            .join(Book, BookTransactionHistory.book_id == Book.id)
            .filter(
                BookTransactionHistory.book_id == book_id,
                Book.owner_id == owner_id,
                BookTransactionHistory.returned.is_(True),
                BookTransactionHistory.return_approved.is_(False)
            )
            .order_by(BookTransactionHistory.id)
            .first()
        )

    def save(self, record: BookTransactionHistory) -> BookTransactionHistory:
        """Insert or update a record and commit.

        Raises:
            OperationNotPermittedError: If the write would create a second
                active record for the same book and user
        """
        book_id, user_id = record.book_id, record.user_id
        self.session.add(record)
        try:
            self.session.commit()
            return record
        except IntegrityError:
            self.session.rollback()
            if self.is_already_borrowed_by_user(book_id, user_id):
                raise OperationNotPermittedError(ALREADY_BORROWED)
            raise

    def get_borrowed_books(self, user_id: int, limit: int = 10, offset: int = 0) -> List[BookTransactionHistory]:
        """Get every record where the user is the borrower, newest first"""
        return (
            self.session.query(BookTransactionHistory)
            .options(joinedload(BookTransactionHistory.book))
            .filter(BookTransactionHistory.user_id == user_id)
            .order_by(desc(BookTransactionHistory.created_at), desc(BookTransactionHistory.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_borrowed_books(self, user_id: int) -> int:
        return (
            self.session.query(BookTransactionHistory)
            .filter(BookTransactionHistory.user_id == user_id)
            .count()
        )

    def get_returned_books(self, owner_id: int, limit: int = 10, offset: int = 0) -> List[BookTransactionHistory]:
        """Get every record for books the user owns, newest first"""
        return (
            self.session.query(BookTransactionHistory)
            .join(Book, BookTransactionHistory.book_id == Book.id)
            .options(joinedload(BookTransactionHistory.book))
            .filter(Book.owner_id == owner_id)
            .order_by(desc(BookTransactionHistory.created_at), desc(BookTransactionHistory.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_returned_books(self, owner_id: int) -> int:
        return (
            self.session.query(BookTransactionHistory)
            .join(Book, BookTransactionHistory.book_id == Book.id)
            .filter(Book.owner_id == owner_id)
            .count()
        )
