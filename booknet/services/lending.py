# booknet/services/lending.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from booknet.config import ApprovalGuard, get_settings
from booknet.exceptions import NotFoundError, ForbiddenError, OperationNotPermittedError
from booknet.identity import ActingUser
from booknet.sa.models import Book, BookTransactionHistory
from booknet.sa.repositories.book import BookRepository
from booknet.sa.repositories.history import TransactionHistoryRepository, ALREADY_BORROWED

logger = logging.getLogger(__name__)

NOT_BORROWABLE = "The requested book cannot be borrowed since it is not shareable or is archived"
OWN_BOOK_BORROW = "You cannot borrow your own book"
OWN_BOOK_RETURN = "You cannot borrow or return your own book"
NOT_BORROWED = "You did not borrow this book"
NOT_RETURNED = "The book is not returned yet. You cannot approve its return"


class LendingService:
    """Status toggles and the borrow, return, approve cycle for books.

    Every operation takes the acting user explicitly and performs at most one
    write, through either the catalog or the ledger repository.
    """

    def __init__(
        self,
        session: Session,
        approval_guard: Optional[ApprovalGuard] = None,
        books: Optional[BookRepository] = None,
        ledger: Optional[TransactionHistoryRepository] = None,
    ):
        self.books = books or BookRepository(session)
        self.ledger = ledger or TransactionHistoryRepository(session)
        self.approval_guard = approval_guard or get_settings().approval_guard

    def _get_book(self, book_id: int) -> Book:
        book = self.books.get_by_id(book_id)
        if book is None:
            logger.warning("Book %s not found", book_id)
            raise NotFoundError(f"No book found with ID: {book_id}")
        return book

    def _require_owner(self, book: Book, acting_user: ActingUser, action: str) -> None:
        if book.owner_id != acting_user.id:
            logger.warning("User %s tried to %s book %s owned by %s", acting_user.id, action, book.id, book.owner_id)
            raise ForbiddenError(f"You cannot {action} books you do not own")

    def _require_borrowable(self, book: Book) -> None:
        if book.archived or not book.shareable:
            logger.warning("Book %s is archived or not shareable", book.id)
            raise OperationNotPermittedError(NOT_BORROWABLE)

    def toggle_shareable(self, book_id: int, acting_user: ActingUser) -> bool:
        """Flip the shareable flag of a book.

        Returns:
            The new shareable value

        Raises:
            NotFoundError: If the book does not exist
            ForbiddenError: If the acting user does not own the book
        """
        book = self._get_book(book_id)
        self._require_owner(book, acting_user, "update the shareable status of")
        book.shareable = not book.shareable
        self.books.save(book)
        logger.info("Book %s shareable set to %s by user %s", book.id, book.shareable, acting_user.id)
        return book.shareable

    def toggle_archived(self, book_id: int, acting_user: ActingUser) -> bool:
        """Flip the archived flag of a book.

        Returns:
            The new archived value

        Raises:
            NotFoundError: If the book does not exist
            ForbiddenError: If the acting user does not own the book
        """
        book = self._get_book(book_id)
        self._require_owner(book, acting_user, "update the archived status of")
        book.archived = not book.archived
        self.books.save(book)
        logger.info("Book %s archived set to %s by user %s", book.id, book.archived, acting_user.id)
        return book.archived

    def borrow(self, book_id: int, acting_user: ActingUser) -> int:
        """Borrow a book on behalf of the acting user.

        Preconditions are checked in order and the first failure wins: the
        book exists, it is shareable and not archived, the acting user is not
        its owner, and the user holds no unreturned copy of it.

        Returns:
            The ID of the new transaction record
        """
        book = self._get_book(book_id)
        self._require_borrowable(book)
        if book.owner_id == acting_user.id:
            logger.warning("User %s tried to borrow own book %s", acting_user.id, book.id)
            raise OperationNotPermittedError(OWN_BOOK_BORROW)
        if self.ledger.is_already_borrowed_by_user(book.id, acting_user.id):
            logger.warning("Book %s already borrowed by user %s", book.id, acting_user.id)
            raise OperationNotPermittedError(ALREADY_BORROWED)

        record = BookTransactionHistory(
            book_id=book.id,
            user_id=acting_user.id,
            returned=False,
            return_approved=False
        )
        record = self.ledger.save(record)
        logger.info("User %s borrowed book %s (record %s)", acting_user.id, book.id, record.id)
        return record.id

    def return_book(self, book_id: int, acting_user: ActingUser) -> int:
        """Mark the acting user's active borrow of a book as returned.

        The borrowable check is applied here as well, so a book archived
        while lent out cannot be returned until it is unarchived.

        Returns:
            The ID of the updated transaction record
        """
        book = self._get_book(book_id)
        self._require_borrowable(book)
        if book.owner_id == acting_user.id:
            logger.warning("User %s tried to return own book %s", acting_user.id, book.id)
            raise OperationNotPermittedError(OWN_BOOK_RETURN)

        record = self.ledger.find_active_record(book.id, acting_user.id)
        if record is None:
            logger.warning("User %s has no active borrow of book %s", acting_user.id, book.id)
            raise OperationNotPermittedError(NOT_BORROWED)

        record.returned = True
        record = self.ledger.save(record)
        logger.info("User %s returned book %s (record %s)", acting_user.id, book.id, record.id)
        return record.id

    def approve_return(self, book_id: int, acting_user: ActingUser) -> int:
        """Approve a returned borrow of a book.

        With ApprovalGuard.LEGACY the owner is rejected before the lookup, as
        in return_book, and the lookup then requires the acting user to be the
        owner, so no approval can succeed. ApprovalGuard.OWNER requires the
        acting user to own the book instead.

        Returns:
            The ID of the approved transaction record
        """
        book = self._get_book(book_id)
        self._require_borrowable(book)
        if self.approval_guard == ApprovalGuard.OWNER:
            self._require_owner(book, acting_user, "approve returns of")
        elif book.owner_id == acting_user.id:
            logger.warning("User %s rejected approving own book %s", acting_user.id, book.id)
            raise OperationNotPermittedError(OWN_BOOK_RETURN)

        record = self.ledger.find_returned_unapproved(book.id, acting_user.id)
        if record is None:
            logger.warning("No returned record awaiting approval for book %s", book.id)
            raise OperationNotPermittedError(NOT_RETURNED)

        record.return_approved = True
        record = self.ledger.save(record)
        logger.info("User %s approved return of book %s (record %s)", acting_user.id, book.id, record.id)
        return record.id
