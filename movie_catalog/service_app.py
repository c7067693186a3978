import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.infrastructure.config.settings import ServiceSettings, load_settings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import MongoStore
from movie_catalog.presentation.middleware import add_request_logging
from movie_catalog.presentation.routers import health
from movie_catalog.presentation.rpc import movies

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings(ServiceSettings)
    store = await MongoStore.connect(settings)
    try:
        await store.ensure_indexes()
        app.state.settings = settings
        app.state.store = store
        logger.info("Movies service started")
        yield
    finally:
        store.close()
        logger.info("Movies service stopped")


app = FastAPI(title="Movies Service", lifespan=lifespan)
add_request_logging(app)

app.include_router(health.router)
app.include_router(movies.router)


def run() -> None:
    try:
        settings = load_settings(ServiceSettings)
    except ConfigurationError as e:
        logger.critical(str(e))
        sys.exit(1)

    logger.info(f"Starting movies service on {settings.RPC_HOST}:{settings.RPC_PORT}")
    uvicorn.run(app, host=settings.RPC_HOST, port=settings.RPC_PORT, log_config=None)


if __name__ == "__main__":
    run()
