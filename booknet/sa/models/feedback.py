# booknet/sa/models/feedback.py
from sqlalchemy import Integer, Float, String, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Feedback(Base, TimestampMixin):
    __tablename__ = 'feedback'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    note: Mapped[float] = mapped_column(Float, nullable=False)
    comment: Mapped[str] = mapped_column(String, nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False, index=True)
    created_by: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)

    # Relationships
    book = relationship('Book', back_populates='feedbacks')
    author = relationship('User')
