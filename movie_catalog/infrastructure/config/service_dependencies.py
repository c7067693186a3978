from typing import Annotated

from fastapi import Depends, Request

from movie_catalog.applications.services.movie_service import MovieService
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort
from movie_catalog.infrastructure.adapters.repositories.mongo_movie_repository import MongoMovieRepository
from movie_catalog.infrastructure.config.settings import ServiceSettings
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.database import MongoStore


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog.movies_service", component="movies-service")


def get_settings(request: Request) -> ServiceSettings:
    return request.app.state.settings


def get_store(request: Request) -> MongoStore:
    return request.app.state.store


def get_movie_repository(store: Annotated[MongoStore, Depends(get_store)]) -> MovieRepository:
    return MongoMovieRepository(store.movies)


def get_movie_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieServicePort:
    return MovieService(movie_repository, logger)
