# booknet/sa/models/history.py
from sqlalchemy import Integer, Boolean, ForeignKey, Index, text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class BookTransactionHistory(Base, TimestampMixin):
    """One borrow of a book by a user, followed through return and approval."""
    __tablename__ = 'book_transaction_history'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    returned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    return_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    book = relationship('Book', back_populates='histories')
    user = relationship('User', back_populates='histories')

    __table_args__ = (
        Index('idx_history_user_id', 'user_id'),
        # At most one unreturned record per (book, user)
        Index(
            'uix_history_active_book_user',
            'book_id',
            'user_id',
            unique=True,
            sqlite_where=text('returned = 0'),
            postgresql_where=text('NOT returned'),
        ),
    )

    @property
    def state(self) -> str:
        if self.return_approved:
            return "approved"
        if self.returned:
            return "returned"
        return "active"
