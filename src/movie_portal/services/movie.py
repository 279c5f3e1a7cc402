import logging
from abc import ABC, abstractmethod
from typing import Annotated

from fastapi import Depends
from movie_portal.core.errors import MovieNotFoundError, PersistenceError
from movie_portal.models.movie import Movie, MovieIn

from .storage import MovieStorageABC, get_movie_storage
from .validation import (
    MISSING_FIELDS_MESSAGE,
    MISSING_ID_MESSAGE,
    require_movie_id,
    validate_movie_fields,
)

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch movies"
ADD_FAILED_MESSAGE = "Failed to add movie"
UPDATE_FAILED_MESSAGE = "Failed to update movie"
DELETE_FAILED_MESSAGE = "Failed to delete movie"


class MovieServiceABC(ABC):
    @abstractmethod
    async def list_movies(self) -> list[Movie]:
        """List every stored movie."""
        ...

    @abstractmethod
    async def create_movie(self, payload: MovieIn) -> Movie:
        """Validate the payload and persist a new movie."""
        ...

    @abstractmethod
    async def update_movie(self, payload: MovieIn) -> Movie:
        """Validate the payload and replace the movie with ``payload.id``."""
        ...

    @abstractmethod
    async def delete_movie(self, payload: MovieIn) -> None:
        """Delete the movie with ``payload.id``."""
        ...


class MovieService(MovieServiceABC):
    def __init__(self, storage: MovieStorageABC):
        self.storage = storage

    async def list_movies(self) -> list[Movie]:
        try:
            movies = await self.storage.list_all()
        except PersistenceError as e:
            logger.error(f"Error fetching movies: {e}", exc_info=True)
            raise PersistenceError(FETCH_FAILED_MESSAGE) from e

        logger.info(f"A list of movies was requested, {len(movies)} entries were found")
        return movies

    async def create_movie(self, payload: MovieIn) -> Movie:
        fields = validate_movie_fields(payload)

        try:
            movie = await self.storage.create(fields)
        except PersistenceError as e:
            logger.error(f"Error adding movie: {e}", exc_info=True)
            raise PersistenceError(ADD_FAILED_MESSAGE) from e

        logger.info(f"A new movie has been added: ID {movie.id}, {movie.title}")
        return movie

    async def update_movie(self, payload: MovieIn) -> Movie:
        movie_id = require_movie_id(payload.id, MISSING_FIELDS_MESSAGE)
        fields = validate_movie_fields(payload)

        try:
            movie = await self.storage.update(movie_id, fields)
        except MovieNotFoundError:
            logger.warning(f"Attempt to update a non-existent movie ID {movie_id}")
            raise
        except PersistenceError as e:
            logger.error(f"Error updating movie {movie_id}: {e}", exc_info=True)
            raise PersistenceError(UPDATE_FAILED_MESSAGE) from e

        logger.info(f"Updated movie ID {movie_id}: {movie.title}")
        return movie

    async def delete_movie(self, payload: MovieIn) -> None:
        movie_id = require_movie_id(payload.id, MISSING_ID_MESSAGE)

        try:
            await self.storage.delete(movie_id)
        except MovieNotFoundError:
            logger.warning(f"Attempt to delete a non-existent movie ID {movie_id}")
            raise
        except PersistenceError as e:
            logger.error(f"Error deleting movie {movie_id}: {e}", exc_info=True)
            raise PersistenceError(DELETE_FAILED_MESSAGE) from e

        logger.info(f"Deleted movie ID {movie_id}")


def get_movie_service(
    storage: Annotated[MovieStorageABC, Depends(get_movie_storage)],
) -> MovieServiceABC:
    return MovieService(storage)
