import logging

import backoff
import elastic_transport
from elasticsearch import AsyncElasticsearch
from movie_portal.core.config import Settings

logger = logging.getLogger(__name__)


def create_elastic(settings: Settings) -> AsyncElasticsearch:
    return AsyncElasticsearch(hosts=[settings.es_url])


async def wait_for_elastic(elastic: AsyncElasticsearch, max_time: int) -> None:
    """Block until Elasticsearch answers, retrying connection errors with backoff."""

    @backoff.on_exception(
        backoff.expo,
        (elastic_transport.ConnectionError, elastic_transport.ConnectionTimeout),
        max_time=max_time,
        logger=logger,
    )
    async def ping() -> None:
        await elastic.info()

    await ping()
