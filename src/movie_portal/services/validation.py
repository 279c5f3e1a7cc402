import re
from typing import Any, Optional

from movie_portal.core.errors import MovieValidationError
from movie_portal.models.movie import MovieFields, MovieIn

MISSING_FIELDS_MESSAGE = "Missing required fields"
MISSING_ID_MESSAGE = "Missing movie ID"
INVALID_YEAR_MESSAGE = "Invalid year"

# year хранится в индексе как integer (int32)
YEAR_MIN = -(2**31)
YEAR_MAX = 2**31 - 1

_YEAR_PATTERN = re.compile(r"^[+-]?[0-9]{1,10}$")


def normalize_actors(actors: str | list[str] | None) -> list[str]:
    """Resolve the string-or-list ``actors`` input into trimmed names.

    A string is treated as a comma separated list. Empty segments are dropped
    in both forms, so ``"A, ,B"`` and ``["A", " ", "B"]`` both become
    ``["A", "B"]``.
    """
    if actors is None:
        return []

    if isinstance(actors, str):
        segments = actors.split(",")
    else:
        segments = actors

    return [name.strip() for name in segments if name.strip()]


def coerce_year(year: Any) -> int:
    value = _parse_year(year)
    if not YEAR_MIN <= value <= YEAR_MAX:
        raise MovieValidationError(INVALID_YEAR_MESSAGE)
    return value


def _parse_year(year: Any) -> int:
    if isinstance(year, bool):
        raise MovieValidationError(INVALID_YEAR_MESSAGE)

    if isinstance(year, int):
        return year

    if isinstance(year, float):
        if not year.is_integer():
            raise MovieValidationError(INVALID_YEAR_MESSAGE)
        return int(year)

    if isinstance(year, str) and _YEAR_PATTERN.match(year.strip()):
        return int(year.strip())

    raise MovieValidationError(INVALID_YEAR_MESSAGE)


def require_movie_id(movie_id: Optional[str], message: str = MISSING_ID_MESSAGE) -> str:
    if movie_id is None or not movie_id.strip():
        raise MovieValidationError(message)
    return movie_id


def validate_movie_fields(payload: MovieIn) -> MovieFields:
    """Apply the required-field and normalization rules shared by create and update."""
    title = (payload.title or "").strip()
    actors = normalize_actors(payload.actors)
    year = payload.year.strip() if isinstance(payload.year, str) else payload.year

    if not title or not actors or year is None or year == "":
        raise MovieValidationError(MISSING_FIELDS_MESSAGE)

    return MovieFields(title=title, actors=actors, year=coerce_year(year))
