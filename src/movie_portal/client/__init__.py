from .api import AiohttpMoviesApi, MovieApiError, MoviesApiProtocol
from .catalog import MovieCatalog, MovieForm

__all__ = [
    "AiohttpMoviesApi",
    "MovieApiError",
    "MoviesApiProtocol",
    "MovieCatalog",
    "MovieForm",
]
