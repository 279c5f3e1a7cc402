import logging

from elastic_transport import TransportError
from elasticsearch import ApiError, AsyncElasticsearch, NotFoundError
from movie_portal.core.errors import MovieNotFoundError, PersistenceError
from movie_portal.models.movie import Movie, MovieFields
from movie_portal.services.storage import MovieStorageABC

logger = logging.getLogger(__name__)

MOVIES_INDEX_MAPPING = {
    "dynamic": "strict",
    "properties": {
        "title": {
            "type": "text",
            "fields": {"raw": {"type": "keyword"}},
        },
        "actors": {"type": "keyword"},
        "year": {"type": "integer"},
    },
}


class ElasticsearchMovieStorage(MovieStorageABC):
    def __init__(self, elastic: AsyncElasticsearch, index: str, list_size: int):
        self.elastic = elastic
        self.index = index
        self.list_size = list_size

    async def create_index(self) -> None:
        if await self.elastic.indices.exists(index=self.index):
            return

        await self.elastic.indices.create(index=self.index, mappings=MOVIES_INDEX_MAPPING)
        logger.info(f"Created index {self.index}")

    async def list_all(self) -> list[Movie]:
        try:
            response = await self.elastic.search(
                index=self.index,
                query={"match_all": {}},
                size=self.list_size,
                sort=["_doc"],
            )
        except NotFoundError:
            # индекс ещё не создан
            return []
        except (ApiError, TransportError) as e:
            raise PersistenceError(f"search in {self.index} failed: {e}") from e

        return [
            Movie.from_document(hit["_id"], hit["_source"])
            for hit in response["hits"]["hits"]
        ]

    async def create(self, fields: MovieFields) -> Movie:
        document = fields.model_dump()
        try:
            response = await self.elastic.index(
                index=self.index, document=document, refresh="wait_for"
            )
        except (ApiError, TransportError) as e:
            raise PersistenceError(f"index into {self.index} failed: {e}") from e

        return Movie.from_document(response["_id"], document)

    async def update(self, movie_id: str, fields: MovieFields) -> Movie:
        document = fields.model_dump()
        try:
            await self.elastic.update(
                index=self.index, id=movie_id, doc=document, refresh="wait_for"
            )
        except NotFoundError as e:
            raise MovieNotFoundError(movie_id) from e
        except (ApiError, TransportError) as e:
            raise PersistenceError(f"update of {movie_id} failed: {e}") from e

        return Movie.from_document(movie_id, document)

    async def delete(self, movie_id: str) -> None:
        try:
            await self.elastic.delete(index=self.index, id=movie_id, refresh="wait_for")
        except NotFoundError as e:
            raise MovieNotFoundError(movie_id) from e
        except (ApiError, TransportError) as e:
            raise PersistenceError(f"delete of {movie_id} failed: {e}") from e

    async def close(self) -> None:
        await self.elastic.close()
