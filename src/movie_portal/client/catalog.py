import logging

from movie_portal.models.movie import Movie
from pydantic import BaseModel

from .api import MovieApiError, MoviesApiProtocol

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch movies"
SAVE_FAILED_MESSAGE = "Failed to save movie"
DELETE_FAILED_MESSAGE = "Failed to delete movie"


class MovieForm(BaseModel):
    """Raw values of the add/edit form, actors comma separated."""

    title: str = ""
    actors: str = ""
    year: str = ""

    def actor_list(self) -> list[str]:
        return [actor.strip() for actor in self.actors.split(",") if actor.strip()]

    def year_value(self) -> int | str:
        year = self.year.strip()
        return int(year) if year.isdecimal() else year


class MovieCatalog:
    """Local mirror of the server's movie list.

    The mirror changes only after the server confirms a mutation. A failed
    request raises ``MovieApiError`` with a user facing message and leaves
    ``movies`` untouched.
    """

    def __init__(self, api: MoviesApiProtocol):
        self.api = api
        self.movies: list[Movie] = []

    async def refresh(self) -> list[Movie]:
        try:
            self.movies = await self.api.list_movies()
        except MovieApiError as e:
            logger.error(f"{FETCH_FAILED_MESSAGE}: {e.message}")
            raise MovieApiError(FETCH_FAILED_MESSAGE, e.status) from e
        return self.movies

    async def add(self, form: MovieForm) -> Movie:
        try:
            movie = await self.api.create_movie(
                form.title, form.actor_list(), form.year_value()
            )
        except MovieApiError as e:
            raise MovieApiError(SAVE_FAILED_MESSAGE, e.status) from e

        self.movies = [*self.movies, movie]
        return movie

    async def edit(self, movie_id: str, form: MovieForm) -> Movie:
        try:
            movie = await self.api.update_movie(
                movie_id, form.title, form.actor_list(), form.year_value()
            )
        except MovieApiError as e:
            raise MovieApiError(SAVE_FAILED_MESSAGE, e.status) from e

        self.movies = [movie if m.id == movie.id else m for m in self.movies]
        return movie

    async def remove(self, movie_id: str) -> None:
        try:
            await self.api.delete_movie(movie_id)
        except MovieApiError as e:
            raise MovieApiError(DELETE_FAILED_MESSAGE, e.status) from e

        self.movies = [movie for movie in self.movies if movie.id != movie_id]

    @staticmethod
    def edit_form(movie: Movie) -> MovieForm:
        return MovieForm(
            title=movie.title, actors=", ".join(movie.actors), year=str(movie.year)
        )
