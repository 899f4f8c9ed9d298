from .lending import LendingService
from .book_service import BookService
from .feedback_service import FeedbackService
from .pagination import Page

__all__ = ['LendingService', 'BookService', 'FeedbackService', 'Page']
