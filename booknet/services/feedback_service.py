# booknet/services/feedback_service.py
import logging

from sqlalchemy.orm import Session

from booknet.exceptions import InvalidRequestError, NotFoundError, OperationNotPermittedError
from booknet.identity import ActingUser
from booknet.sa.models import Feedback
from booknet.sa.repositories.book import BookRepository
from booknet.sa.repositories.feedback import FeedbackRepository
from .pagination import Page, page_bounds

logger = logging.getLogger(__name__)

MIN_NOTE = 0.0
MAX_NOTE = 5.0


class FeedbackService:
    def __init__(self, session: Session):
        self.books = BookRepository(session)
        self.feedbacks = FeedbackRepository(session)

    def save_feedback(self, book_id: int, note: float, comment: str, acting_user: ActingUser) -> int:
        """Leave feedback on a book someone else shares.

        Raises:
            NotFoundError: If the book does not exist
            OperationNotPermittedError: If the book is archived, not
                shareable, or owned by the acting user
            InvalidRequestError: If the note is out of range or the comment is empty
        """
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError(f"No book found with ID: {book_id}")
        if book.archived or not book.shareable:
            raise OperationNotPermittedError("You cannot give feedback for an archived or not shareable book")
        if book.owner_id == acting_user.id:
            raise OperationNotPermittedError("You cannot give feedback to your own book")
        if note is None or not MIN_NOTE <= note <= MAX_NOTE:
            raise InvalidRequestError(f"Note must be between {MIN_NOTE:g} and {MAX_NOTE:g}")
        if not comment or not comment.strip():
            raise InvalidRequestError("Comment is required")

        feedback = self.feedbacks.save(
            Feedback(note=note, comment=comment.strip(), book_id=book.id, created_by=acting_user.id)
        )
        logger.info("User %s left feedback %s on book %s", acting_user.id, feedback.id, book.id)
        return feedback.id

    def find_all_feedbacks_by_book(self, book_id: int, page: int, size: int, acting_user: ActingUser) -> Page[dict]:
        """Feedback on a book, each entry flagged when written by the acting user"""
        limit, offset = page_bounds(page, size)
        if self.books.get_by_id(book_id) is None:
            raise NotFoundError(f"No book found with ID: {book_id}")
        entries = self.feedbacks.get_by_book(book_id, limit=limit, offset=offset)
        return Page(
            content=[
                {
                    "id": f.id,
                    "note": f.note,
                    "comment": f.comment,
                    "own_feedback": f.created_by == acting_user.id,
                    "created_at": f.created_at,
                }
                for f in entries
            ],
            number=page,
            size=size,
            total_elements=self.feedbacks.count_by_book(book_id)
        )
