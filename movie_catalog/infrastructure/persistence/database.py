from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, TEXT
from pymongo.errors import PyMongoError

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.infrastructure.config.settings import ServiceSettings
from movie_catalog.infrastructure.logging.logger import Logger

MOVIES_COLLECTION = "movies"

logger = Logger.get_logger(__name__)


class MongoStore:
    """Process-wide MongoDB handle shared by every request.

    Build it once with ``connect`` during application startup and release it
    with ``close`` on shutdown.
    """

    def __init__(self, client: AsyncIOMotorClient, database_name: str):
        self.client = client
        self.database: AsyncIOMotorDatabase = client[database_name]

    @classmethod
    async def connect(cls, settings: ServiceSettings) -> "MongoStore":
        timeout_ms = int(settings.STORE_TIMEOUT * 1000)
        client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            maxPoolSize=settings.MAX_POOL_SIZE,
            connectTimeoutMS=timeout_ms,
            serverSelectionTimeoutMS=timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error(f"Failed to ping MongoDB: {e}")
            raise RepositoryError(f"failed to connect to MongoDB: {e}") from e

        logger.info(f"Successfully connected to MongoDB, using database '{settings.DATABASE_NAME}'")
        return cls(client, settings.DATABASE_NAME)

    @property
    def movies(self) -> AsyncIOMotorCollection:
        return self.database[MOVIES_COLLECTION]

    async def ensure_indexes(self) -> None:
        # _id is unique on every collection, so only the search index is needed
        try:
            await self.movies.create_index([("title", TEXT), ("year", ASCENDING)])
        except PyMongoError as e:
            logger.error(f"Failed to create movie indexes: {e}")
            raise RepositoryError(f"failed to create movie indexes: {e}") from e

    def close(self) -> None:
        self.client.close()
        logger.info("Disconnected from MongoDB")
