from http import HTTPStatus

import aiohttp
import pytest
import pytest_asyncio
from movie_portal.client import AiohttpMoviesApi, MovieApiError, MovieCatalog, MovieForm


@pytest_asyncio.fixture
async def client_http_session():
    session = aiohttp.ClientSession()
    yield session
    await session.close()


@pytest.fixture
def movies_api(client_http_session, live_server_url):
    return AiohttpMoviesApi(client_http_session, live_server_url)


@pytest.mark.asyncio
async def test_crud_round(movies_api, movie_storage):
    assert await movies_api.list_movies() == []

    created = await movies_api.create_movie("Inception", ["Leo", "Tom"], 2010)
    assert created.id in movie_storage.documents
    assert created.actors == ["Leo", "Tom"]

    updated = await movies_api.update_movie(created.id, "Inception", ["Leo"], "2011")
    assert updated.id == created.id
    assert updated.year == 2011

    assert await movies_api.list_movies() == [updated]

    await movies_api.delete_movie(created.id)
    assert await movies_api.list_movies() == []


@pytest.mark.asyncio
async def test_error_status_raises(movies_api):
    with pytest.raises(MovieApiError) as exc_info:
        await movies_api.delete_movie("missing")

    assert exc_info.value.status == HTTPStatus.NOT_FOUND
    assert "Movie not found" in exc_info.value.message


@pytest.mark.asyncio
async def test_validation_error_raises(movies_api, movie_storage):
    with pytest.raises(MovieApiError) as exc_info:
        await movies_api.create_movie("Inception", [], 2010)

    assert exc_info.value.status == HTTPStatus.BAD_REQUEST
    assert movie_storage.documents == {}


@pytest.mark.asyncio
async def test_catalog_over_http(movies_api):
    catalog = MovieCatalog(movies_api)
    await catalog.refresh()

    movie = await catalog.add(MovieForm(title="Heat", actors="Al Pacino, Robert De Niro", year="1995"))
    assert catalog.movies == [movie]

    with pytest.raises(MovieApiError) as exc_info:
        await catalog.edit("missing", MovieForm(title="Heat", actors="Al", year="1995"))
    assert exc_info.value.message == "Failed to save movie"
    assert catalog.movies == [movie]

    await catalog.remove(movie.id)
    assert catalog.movies == []


@pytest.mark.asyncio
async def test_unreachable_server(client_http_session):
    movies_api = AiohttpMoviesApi(client_http_session, "http://127.0.0.1:1")

    with pytest.raises(MovieApiError) as exc_info:
        await movies_api.list_movies()

    assert exc_info.value.status is None
