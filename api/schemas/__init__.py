from .common import PageResponse, IdResponse, StatusResponse
from .book import BookRequest, BookResponse, BorrowedBookResponse
from .feedback import FeedbackRequest, FeedbackResponse

__all__ = [
    'PageResponse',
    'IdResponse',
    'StatusResponse',
    'BookRequest',
    'BookResponse',
    'BorrowedBookResponse',
    'FeedbackRequest',
    'FeedbackResponse',
]
