# booknet/sa/__init__.py
from .database import Database
from .models import Base, User, Book, BookTransactionHistory, Feedback

__all__ = [
    'Database',
    'Base',
    'User',
    'Book',
    'BookTransactionHistory',
    'Feedback'
]
