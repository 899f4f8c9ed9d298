# booknet/sa/models/__init__.py
from .base import Base, TimestampMixin
from .user import User
from .book import Book
from .history import BookTransactionHistory
from .feedback import Feedback

__all__ = [
    'Base',
    'TimestampMixin',
    'User',
    'Book',
    'BookTransactionHistory',
    'Feedback'
]
