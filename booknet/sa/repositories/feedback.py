# booknet/sa/repositories/feedback.py
from typing import List
from sqlalchemy import desc
from sqlalchemy.orm import Session
from ..models import Feedback

class FeedbackRepository:
    def __init__(self, session: Session):
        self.session = session

    def save(self, feedback: Feedback) -> Feedback:
        self.session.add(feedback)
        self.session.commit()
        return feedback

    def get_by_book(self, book_id: int, limit: int = 10, offset: int = 0) -> List[Feedback]:
        """Get feedback left on a book, newest first"""
        return (
            self.session.query(Feedback)
            .filter(Feedback.book_id == book_id)
            .order_by(desc(Feedback.created_at), desc(Feedback.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_by_book(self, book_id: int) -> int:
        return self.session.query(Feedback).filter(Feedback.book_id == book_id).count()
