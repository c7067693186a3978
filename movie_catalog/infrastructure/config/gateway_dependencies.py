from typing import Annotated

from fastapi import Depends, Request

from movie_catalog.applications.services.gateway_movie_service import GatewayMovieService
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.remote_movie_service_port import RemoteMovieServicePort
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog.api_gateway", component="api-gateway")


def get_remote_movie_service(request: Request) -> RemoteMovieServicePort:
    return request.app.state.movie_service_client


def get_gateway_movie_service(
    remote_service: Annotated[RemoteMovieServicePort, Depends(get_remote_movie_service)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> GatewayMovieService:
    return GatewayMovieService(remote_service, logger)
