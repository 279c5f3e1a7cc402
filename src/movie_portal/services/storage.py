from abc import ABC, abstractmethod

from fastapi import Request
from movie_portal.models.movie import Movie, MovieFields


class MovieStorageABC(ABC):
    @abstractmethod
    async def list_all(self) -> list[Movie]:
        """Retrieve every movie in store order.

        Returns:
            List of movies, empty when nothing is stored

        Raises:
            PersistenceError: the store could not be queried
        """
        ...

    @abstractmethod
    async def create(self, fields: MovieFields) -> Movie:
        """Persist a new movie. The store assigns its id.

        Args:
            fields: Validated movie content

        Returns:
            The persisted movie including its id

        Raises:
            PersistenceError: the store rejected the write
        """
        ...

    @abstractmethod
    async def update(self, movie_id: str, fields: MovieFields) -> Movie:
        """Replace title, actors and year of an existing movie.

        Args:
            movie_id: Id of the movie to replace
            fields: Validated movie content

        Returns:
            The movie as persisted after replacement

        Raises:
            MovieNotFoundError: no movie has ``movie_id``
            PersistenceError: the store rejected the write
        """
        ...

    @abstractmethod
    async def delete(self, movie_id: str) -> None:
        """Remove a movie.

        Args:
            movie_id: Id of the movie to remove

        Raises:
            MovieNotFoundError: no movie has ``movie_id``
            PersistenceError: the store rejected the operation
        """
        ...

    async def close(self) -> None:
        pass


def get_movie_storage(request: Request) -> MovieStorageABC:
    storage = getattr(request.app.state, "movie_storage", None)
    if storage is None:
        raise ValueError("Movie storage is not initialized.")
    return storage
