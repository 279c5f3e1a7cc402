import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from movie_portal.core.errors import MoviePortalError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(MoviePortalError)
    async def movie_portal_error_handler(request: Request, exc: MoviePortalError):
        return ORJSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid body on {request.method} {request.url.path}: {exc.errors()}")
        return ORJSONResponse(
            status_code=HTTPStatus.BAD_REQUEST, content={"error": INVALID_BODY_MESSAGE}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # FastAPI поднимает HTTPException(400), если тело не удалось разобрать
        if exc.status_code == HTTPStatus.BAD_REQUEST:
            message = INVALID_BODY_MESSAGE
        else:
            message = str(exc.detail)
        return ORJSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return ORJSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
