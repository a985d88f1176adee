"""
Errors raised by the book projection service.
"""

GENERIC_FETCH_ERROR = "Failed to fetch books"


class BookServiceError(Exception):
    """Base class for failures while fetching books from upstream."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamRejectedError(BookServiceError):
    """
    The upstream API answered with a non-2xx status.

    The status code is kept for logging only; callers always see the generic
    message.
    """

    def __init__(self, status_code: int):
        super().__init__(GENERIC_FETCH_ERROR)
        self.status_code = status_code


class UpstreamTransportError(BookServiceError):
    """
    Building the request, talking to upstream or decoding its body failed.

    The message is the raw description of the underlying failure.
    """
