"""Typed errors that cross from the search core to the HTTP boundary"""

from fastapi import status


class SearchError(Exception):
    """Base error with the HTTP status the boundary layer should answer with"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SearchError):
    """Article directory cannot be listed, or an article cannot be read"""

    status_code = status.HTTP_404_NOT_FOUND


class IndexIOError(SearchError):
    """Persisted index file cannot be created or opened"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
