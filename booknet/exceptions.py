# booknet/exceptions.py


class BookNetworkError(Exception):
    """Base exception for book network errors."""


class NotFoundError(BookNetworkError):
    """Referenced book or record does not exist."""


class ForbiddenError(BookNetworkError):
    """Acting user lacks ownership rights for the operation."""


class OperationNotPermittedError(BookNetworkError):
    """Operation violates a lending business rule."""


class InvalidRequestError(BookNetworkError):
    """Input to a service call is malformed."""
