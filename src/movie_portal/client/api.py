from http import HTTPStatus
from typing import Any, Optional, Protocol

import aiohttp
from movie_portal.models.movie import Movie

MOVIES_PATH = "/api/movies"


class MovieApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class MoviesApiProtocol(Protocol):
    async def list_movies(self) -> list[Movie]:
        """Fetch every movie from the server."""
        ...

    async def create_movie(
        self, title: str, actors: list[str], year: int | str
    ) -> Movie:
        """Create a movie and return it as persisted, id included."""
        ...

    async def update_movie(
        self, movie_id: str, title: str, actors: list[str], year: int | str
    ) -> Movie:
        """Replace the movie content and return it as persisted."""
        ...

    async def delete_movie(self, movie_id: str) -> None:
        """Delete a movie by id."""
        ...


class AiohttpMoviesApi(MoviesApiProtocol):
    """Movies endpoint client. Any non-2xx answer raises ``MovieApiError``."""

    def __init__(self, session: aiohttp.ClientSession, base_url: str):
        self.session = session
        self.url = base_url.rstrip("/") + MOVIES_PATH

    async def list_movies(self) -> list[Movie]:
        body = await self._request("GET", HTTPStatus.OK)
        if not isinstance(body, list):
            return []
        return [Movie.model_validate(item) for item in body]

    async def create_movie(
        self, title: str, actors: list[str], year: int | str
    ) -> Movie:
        body = await self._request(
            "POST",
            HTTPStatus.CREATED,
            {"title": title, "actors": actors, "year": year},
        )
        return Movie.model_validate(body)

    async def update_movie(
        self, movie_id: str, title: str, actors: list[str], year: int | str
    ) -> Movie:
        body = await self._request(
            "PUT",
            HTTPStatus.OK,
            {"id": movie_id, "title": title, "actors": actors, "year": year},
        )
        return Movie.model_validate(body)

    async def delete_movie(self, movie_id: str) -> None:
        await self._request("DELETE", HTTPStatus.OK, {"id": movie_id})

    async def _request(
        self, method: str, expected: HTTPStatus, payload: Optional[dict] = None
    ) -> Any:
        try:
            async with self.session.request(method, self.url, json=payload) as response:
                try:
                    body = await response.json(content_type=None)
                except ValueError:
                    body = None
                if response.status != expected:
                    error = body.get("error") if isinstance(body, dict) else None
                    raise MovieApiError(
                        f"{method} {self.url} returned {response.status}: {error}",
                        response.status,
                    )
                return body
        except aiohttp.ClientError as e:
            raise MovieApiError(f"{method} {self.url} failed: {e}") from e
