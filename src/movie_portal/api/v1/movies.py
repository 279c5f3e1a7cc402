from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Body, Depends
from movie_portal.models.movie import Movie, MovieIn
from movie_portal.services.movie import MovieServiceABC, get_movie_service
from pydantic import BaseModel

router = APIRouter()


class MovieResponse(BaseModel):
    id: str
    title: str
    actors: list[str]
    year: int

    @classmethod
    def from_model(cls, movie: Movie) -> "MovieResponse":
        return cls(id=movie.id, title=movie.title, actors=movie.actors, year=movie.year)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


ERROR_RESPONSES = {
    HTTPStatus.BAD_REQUEST.value: {"model": ErrorResponse},
    HTTPStatus.INTERNAL_SERVER_ERROR.value: {"model": ErrorResponse},
}
NOT_FOUND_RESPONSE = {
    HTTPStatus.NOT_FOUND.value: {
        "model": ErrorResponse,
        "description": "The movie was not found",
    }
}


@router.get(
    "",
    response_model=list[MovieResponse],
    summary="Movies list",
    description="Returns every stored movie.",
    responses={HTTPStatus.INTERNAL_SERVER_ERROR.value: {"model": ErrorResponse}},
)
async def list_movies(
    movie_service: Annotated[MovieServiceABC, Depends(get_movie_service)],
) -> list[MovieResponse]:
    movies = await movie_service.list_movies()
    return [MovieResponse.from_model(movie) for movie in movies]


@router.post(
    "",
    response_model=MovieResponse,
    status_code=HTTPStatus.CREATED,
    summary="Add a new movie",
    description="Actors may be sent as a list or as a comma separated string.",
    response_description="The created movie with its generated id",
    responses=ERROR_RESPONSES,
)
async def create_movie(
    movie_service: Annotated[MovieServiceABC, Depends(get_movie_service)],
    payload: Annotated[MovieIn, Body()],
) -> MovieResponse:
    movie = await movie_service.create_movie(payload)
    return MovieResponse.from_model(movie)


@router.put(
    "",
    response_model=MovieResponse,
    summary="Update movie data",
    description="Replaces title, actors and year of the movie with the given id.",
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def update_movie(
    movie_service: Annotated[MovieServiceABC, Depends(get_movie_service)],
    payload: Annotated[MovieIn, Body()],
) -> MovieResponse:
    movie = await movie_service.update_movie(payload)
    return MovieResponse.from_model(movie)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete a movie",
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def delete_movie(
    movie_service: Annotated[MovieServiceABC, Depends(get_movie_service)],
    payload: Annotated[MovieIn, Body()],
) -> MessageResponse:
    await movie_service.delete_movie(payload)
    return MessageResponse(message="Movie deleted successfully")
