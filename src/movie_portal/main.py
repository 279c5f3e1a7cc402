import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from movie_portal.api import ui
from movie_portal.api.error_handlers import register_error_handlers
from movie_portal.api.v1 import movies
from movie_portal.core.config import Settings, settings
from movie_portal.core.logger import LOGGING
from movie_portal.db.elastic import create_elastic, wait_for_elastic
from movie_portal.services.elastic_storage import ElasticsearchMovieStorage
from movie_portal.services.storage import MovieStorageABC

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    storage: Optional[MovieStorageABC] = None,
) -> FastAPI:
    """Build the application.

    When ``storage`` is given it is used as is and its lifecycle belongs to
    the caller. Otherwise an Elasticsearch backed storage is opened on startup
    and closed on shutdown.
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if storage is not None:
            yield
            return

        elastic_storage = ElasticsearchMovieStorage(
            create_elastic(app_settings),
            index=app_settings.es_index,
            list_size=app_settings.es_list_size,
        )
        await wait_for_elastic(elastic_storage.elastic, app_settings.es_connect_max_time)
        await elastic_storage.create_index()
        app.state.movie_storage = elastic_storage
        logger.info(f"{app_settings.project_name} is ready, index {app_settings.es_index}")

        yield

        await elastic_storage.close()
        app.state.movie_storage = None

    app = FastAPI(
        title=app_settings.project_name,
        docs_url="/api/openapi",
        openapi_url="/api/openapi.json",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.state.movie_storage = storage

    register_error_handlers(app)
    app.include_router(movies.router, prefix="/api/movies", tags=["movies"])
    app.include_router(ui.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "movie_portal.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_config=LOGGING,
    )
