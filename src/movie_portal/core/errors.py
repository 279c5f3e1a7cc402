from http import HTTPStatus


class MoviePortalError(Exception):
    """Base class for errors that are rendered as ``{"error": message}``."""

    http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        return {"error": self.message}


class MovieValidationError(MoviePortalError):
    """Client input is missing or malformed. Never reaches the store."""

    http_status = HTTPStatus.BAD_REQUEST


class MovieNotFoundError(MoviePortalError):
    """The referenced movie id does not exist in the store."""

    http_status = HTTPStatus.NOT_FOUND

    def __init__(self, movie_id: str, message: str = "Movie not found"):
        super().__init__(message)
        self.movie_id = movie_id


class PersistenceError(MoviePortalError):
    """The store is unreachable or rejected the operation."""

    http_status = HTTPStatus.INTERNAL_SERVER_ERROR
