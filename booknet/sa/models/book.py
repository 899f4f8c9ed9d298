# booknet/sa/models/book.py
from sqlalchemy import String, Integer, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    synopsis: Mapped[str | None] = mapped_column(String, nullable=True)
    shareable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    owner_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)

    # Relationships
    owner = relationship('User', back_populates='books')
    histories = relationship('BookTransactionHistory', back_populates='book')
    feedbacks = relationship('Feedback', back_populates='book')

    __table_args__ = (
        Index('idx_book_owner_id', 'owner_id'),
        Index('idx_book_created_at', 'created_at'),
    )
