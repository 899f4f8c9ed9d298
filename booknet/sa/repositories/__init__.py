# booknet/sa/repositories/__init__.py
from .book import BookRepository
from .history import TransactionHistoryRepository
from .user import UserRepository
from .feedback import FeedbackRepository

__all__ = ['BookRepository', 'TransactionHistoryRepository', 'UserRepository', 'FeedbackRepository']
