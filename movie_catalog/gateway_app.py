import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.infrastructure.adapters.services.http_movie_service_client import HttpMovieServiceClient
from movie_catalog.infrastructure.config.settings import GatewaySettings, load_settings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.presentation.middleware import add_request_logging
from movie_catalog.presentation.routers import health, movies

setup_logging()

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings(GatewaySettings)
    client = HttpMovieServiceClient.from_address(settings.movie_service_url, settings.REQUEST_TIMEOUT)
    app.state.settings = settings
    app.state.movie_service_client = client
    logger.info("API gateway started")
    try:
        yield
    finally:
        await client.close()
        logger.info("API gateway stopped")


app = FastAPI(title="Movie API Gateway", version="1.0", lifespan=lifespan)
add_request_logging(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(movies.router)


def run() -> None:
    try:
        settings = load_settings(GatewaySettings)
    except ConfigurationError as e:
        logger.critical(str(e))
        sys.exit(1)

    logger.info(f"Starting API gateway on {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    uvicorn.run(
        app,
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        timeout_keep_alive=settings.KEEP_ALIVE_TIMEOUT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
