from http import HTTPStatus

import pytest
from movie_portal.client import MovieApiError, MovieCatalog, MovieForm
from movie_portal.models.movie import Movie


class RecordingMoviesApi:
    def __init__(self, movies=None):
        self.movies = list(movies or [])
        self.calls = []
        self.failure = None
        self._next_id = 100

    def _check_failure(self):
        if self.failure is not None:
            raise self.failure

    async def list_movies(self):
        self._check_failure()
        return list(self.movies)

    async def create_movie(self, title, actors, year):
        self.calls.append(("create", title, actors, year))
        self._check_failure()
        self._next_id += 1
        return Movie(id=str(self._next_id), title=title, actors=actors, year=int(year))

    async def update_movie(self, movie_id, title, actors, year):
        self.calls.append(("update", movie_id, title, actors, year))
        self._check_failure()
        return Movie(id=movie_id, title=title, actors=actors, year=int(year))

    async def delete_movie(self, movie_id):
        self.calls.append(("delete", movie_id))
        self._check_failure()


ALIEN = Movie(id="1", title="Alien", actors=["Sigourney Weaver"], year=1979)
HEAT = Movie(id="2", title="Heat", actors=["Al Pacino"], year=1995)


@pytest.fixture
def movies_api():
    return RecordingMoviesApi([ALIEN, HEAT])


@pytest.fixture
def catalog(movies_api):
    return MovieCatalog(movies_api)


@pytest.mark.asyncio
async def test_refresh(catalog):
    assert await catalog.refresh() == [ALIEN, HEAT]
    assert catalog.movies == [ALIEN, HEAT]


@pytest.mark.asyncio
async def test_refresh_failure_keeps_movies(catalog, movies_api):
    await catalog.refresh()
    movies_api.failure = MovieApiError("boom", HTTPStatus.INTERNAL_SERVER_ERROR)

    with pytest.raises(MovieApiError) as exc_info:
        await catalog.refresh()

    assert exc_info.value.message == "Failed to fetch movies"
    assert catalog.movies == [ALIEN, HEAT]


@pytest.mark.asyncio
async def test_add_appends_created_movie(catalog, movies_api):
    await catalog.refresh()

    movie = await catalog.add(MovieForm(title="Inception", actors="Leo, Tom ,", year="2010"))

    assert movies_api.calls == [("create", "Inception", ["Leo", "Tom"], 2010)]
    assert catalog.movies == [ALIEN, HEAT, movie]


@pytest.mark.asyncio
async def test_edit_replaces_matching_movie(catalog, movies_api):
    await catalog.refresh()
    form = MovieCatalog.edit_form(ALIEN)
    form.year = "1980"

    movie = await catalog.edit(ALIEN.id, form)

    assert movies_api.calls == [("update", "1", "Alien", ["Sigourney Weaver"], 1980)]
    assert catalog.movies == [movie, HEAT]
    assert movie.year == 1980


@pytest.mark.asyncio
async def test_remove_drops_matching_movie(catalog, movies_api):
    await catalog.refresh()

    await catalog.remove(HEAT.id)

    assert movies_api.calls == [("delete", "2")]
    assert catalog.movies == [ALIEN]


@pytest.mark.parametrize(
    "action, message",
    [
        (lambda c: c.add(MovieForm(title="X", actors="Y", year="2000")), "Failed to save movie"),
        (lambda c: c.edit("1", MovieForm(title="X", actors="Y", year="2000")), "Failed to save movie"),
        (lambda c: c.remove("1"), "Failed to delete movie"),
    ],
)
@pytest.mark.asyncio
async def test_failed_mutation_keeps_movies(catalog, movies_api, action, message):
    await catalog.refresh()
    movies_api.failure = MovieApiError("boom", HTTPStatus.NOT_FOUND)

    with pytest.raises(MovieApiError) as exc_info:
        await action(catalog)

    assert exc_info.value.message == message
    assert exc_info.value.status == HTTPStatus.NOT_FOUND
    assert catalog.movies == [ALIEN, HEAT]


def test_edit_form():
    form = MovieCatalog.edit_form(
        Movie(id="3", title="Inception", actors=["Leo", "Tom"], year=2010)
    )

    assert form == MovieForm(title="Inception", actors="Leo, Tom", year="2010")


def test_form_year_value():
    assert MovieForm(year=" 2010 ").year_value() == 2010
    assert MovieForm(year="soon").year_value() == "soon"
    assert MovieForm(year="\u00b2").year_value() == "\u00b2"
