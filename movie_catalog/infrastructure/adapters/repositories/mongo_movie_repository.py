from typing import Any, List, Mapping

from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError as PydanticValidationError
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from movie_catalog.domain.exceptions import AlreadyExistsError, NotFoundError, RepositoryError, ValidationError
from movie_catalog.domain.models.movie import INT32_MAX, Movie
from movie_catalog.domain.models.movie_filter import MovieFilter
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

# bson raises OverflowError for integers beyond 64 bits while encoding a query
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


class MongoMovieRepository(MovieRepository):
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def _to_domain(self, document: Mapping[str, Any]) -> Movie:
        try:
            return Movie(id=document["_id"], title=document["title"], year=document["year"])
        except (KeyError, PydanticValidationError) as e:
            raise RepositoryError(f"failed to decode movie document: {e}") from e

    def _to_document(self, movie: Movie) -> dict:
        return {"_id": movie.id, "title": movie.title, "year": movie.year}

    async def find_all(self, movie_filter: MovieFilter) -> List[Movie]:
        cursor = (
            self.collection.find({})
            .sort("_id", ASCENDING)
            .skip(movie_filter.skip)
            .limit(movie_filter.limit)
        )
        try:
            documents = await cursor.to_list(length=movie_filter.limit)
        except STORE_ERRORS as e:
            logger.error(f"Failed to find movies: {e}")
            raise RepositoryError(f"failed to find movies: {e}") from e
        finally:
            await cursor.close()

        movies = [self._to_domain(document) for document in documents]
        logger.info(f"Found {len(movies)} movies (page={movie_filter.page}, limit={movie_filter.limit})")
        return movies

    async def find_by_id(self, movie_id: int) -> Movie:
        try:
            document = await self.collection.find_one({"_id": movie_id})
        except STORE_ERRORS as e:
            logger.error(f"Failed to find movie by ID {movie_id}: {e}")
            raise RepositoryError(f"failed to find movie by ID: {e}") from e

        if document is None:
            logger.info(f"Movie {movie_id} not found")
            raise NotFoundError("movie not found")

        return self._to_domain(document)

    async def create(self, movie: Movie) -> Movie:
        try:
            movie.ensure_valid()
        except ValidationError as e:
            raise ValidationError(f"invalid movie data: {e}") from e

        try:
            await self.collection.insert_one(self._to_document(movie))
        except DuplicateKeyError as e:
            logger.warning(f"Movie with ID {movie.id} already exists")
            raise AlreadyExistsError("movie already exists") from e
        except STORE_ERRORS as e:
            logger.error(f"Failed to create movie {movie.id}: {e}")
            raise RepositoryError(f"failed to create movie: {e}") from e

        logger.info(f"Created movie {movie.id} '{movie.title}'")
        return movie.model_copy()

    async def delete(self, movie_id: int) -> None:
        try:
            result = await self.collection.delete_one({"_id": movie_id})
        except STORE_ERRORS as e:
            logger.error(f"Failed to delete movie {movie_id}: {e}")
            raise RepositoryError(f"failed to delete movie: {e}") from e

        if result.deleted_count == 0:
            logger.info(f"Movie {movie_id} not found for deletion")
            raise NotFoundError("movie not found")

        logger.info(f"Deleted movie {movie_id}")

    async def count(self) -> int:
        try:
            return await self.collection.count_documents({})
        except STORE_ERRORS as e:
            logger.error(f"Failed to count movies: {e}")
            raise RepositoryError(f"failed to count movies: {e}") from e

    async def exists_by_id(self, movie_id: int) -> bool:
        try:
            count = await self.collection.count_documents({"_id": movie_id}, limit=1)
        except STORE_ERRORS as e:
            logger.error(f"Failed to check movie existence for {movie_id}: {e}")
            raise RepositoryError(f"failed to check movie existence: {e}") from e
        return count > 0

    async def get_next_id(self) -> int:
        try:
            document = await self.collection.find_one({}, projection={"_id": 1}, sort=[("_id", DESCENDING)])
        except STORE_ERRORS as e:
            logger.error(f"Failed to get max movie ID: {e}")
            raise RepositoryError(f"failed to get max movie ID: {e}") from e

        if document is None:
            logger.info("No movies found, starting with ID 1")
            return 1

        next_id = int(document["_id"]) + 1
        if next_id > INT32_MAX:
            raise RepositoryError("movie ID space exhausted")

        logger.debug(f"Generated next movie ID {next_id}")
        return next_id
