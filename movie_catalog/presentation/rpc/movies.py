import asyncio
from typing import Annotated, Awaitable, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, Header

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.applications.interfaces.dtos.rpc import (
    CreateMovieRequest,
    ErrorCode,
    GetMoviesRequest,
    GetMoviesResponse,
    MovieIdRequest,
    MovieResponse,
    RpcResponse,
)
from movie_catalog.domain.exceptions import (
    AlreadyExistsError,
    DomainError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from movie_catalog.domain.models.movie import is_valid_movie_id
from movie_catalog.domain.models.movie_filter import MovieFilter
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort
from movie_catalog.infrastructure.config.service_dependencies import get_movie_service, get_settings
from movie_catalog.infrastructure.config.settings import ServiceSettings
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/rpc/MovieService", tags=["rpc"])

MovieServiceDep = Annotated[MovieServicePort, Depends(get_movie_service)]
SettingsDep = Annotated[ServiceSettings, Depends(get_settings)]
TimeoutHeader = Annotated[Optional[float], Header(alias="X-Request-Timeout")]

T = TypeVar("T")
ResponseT = TypeVar("ResponseT", bound=RpcResponse)


def _deadline(settings: ServiceSettings, requested: Optional[float]) -> float:
    if requested is None or requested <= 0:
        return settings.REQUEST_TIMEOUT
    return min(requested, settings.REQUEST_TIMEOUT)


async def _within_deadline(call: Awaitable[T], timeout: float) -> T:
    try:
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise RepositoryError(f"deadline of {timeout}s exceeded") from e


def _failure(response_cls: Type[ResponseT], error: DomainError) -> ResponseT:
    if isinstance(error, ValidationError):
        code = ErrorCode.INVALID_ARGUMENT
    elif isinstance(error, NotFoundError):
        return response_cls(success=False, error="movie not found", error_code=ErrorCode.NOT_FOUND)
    elif isinstance(error, AlreadyExistsError):
        code = ErrorCode.ALREADY_EXISTS
    else:
        code = ErrorCode.INTERNAL
    return response_cls(success=False, error=str(error), error_code=code)


@router.post("/GetMovies", response_model=GetMoviesResponse)
async def get_movies(
    request: GetMoviesRequest, service: MovieServiceDep, settings: SettingsDep, timeout: TimeoutHeader = None
):
    logger.info(f"RPC GetMovies called page={request.page} limit={request.limit}")
    try:
        movies, total = await _within_deadline(
            service.get_movies(MovieFilter(page=request.page, limit=request.limit)),
            _deadline(settings, timeout),
        )
    except DomainError as e:
        logger.error(f"Failed to get movies: {e}")
        return _failure(GetMoviesResponse, e)

    return GetMoviesResponse(
        success=True,
        movies=[MoviePublic.model_validate(movie) for movie in movies],
        total=total,
    )


@router.post("/GetMovie", response_model=MovieResponse)
async def get_movie(
    request: MovieIdRequest, service: MovieServiceDep, settings: SettingsDep, timeout: TimeoutHeader = None
):
    logger.info(f"RPC GetMovie called id={request.id}")
    if not is_valid_movie_id(request.id):
        logger.warning(f"Invalid movie ID {request.id}")
        return MovieResponse(success=False, error="invalid movie ID", error_code=ErrorCode.INVALID_ARGUMENT)

    try:
        movie = await _within_deadline(service.get_movie(request.id), _deadline(settings, timeout))
    except DomainError as e:
        logger.error(f"Failed to get movie {request.id}: {e}")
        return _failure(MovieResponse, e)

    return MovieResponse(success=True, movie=MoviePublic.model_validate(movie))


@router.post("/CreateMovie", response_model=MovieResponse)
async def create_movie(
    request: CreateMovieRequest, service: MovieServiceDep, settings: SettingsDep, timeout: TimeoutHeader = None
):
    logger.info(f"RPC CreateMovie called title='{request.title}' year='{request.year}'")
    if not request.title or not request.year:
        logger.warning(f"Invalid movie data title='{request.title}' year='{request.year}'")
        return MovieResponse(
            success=False, error="title and year are required", error_code=ErrorCode.INVALID_ARGUMENT
        )

    try:
        movie = await _within_deadline(
            service.create_movie(request.title, request.year), _deadline(settings, timeout)
        )
    except DomainError as e:
        logger.error(f"Failed to create movie title='{request.title}': {e}")
        return _failure(MovieResponse, e)

    return MovieResponse(success=True, movie=MoviePublic.model_validate(movie))


@router.post("/DeleteMovie", response_model=RpcResponse)
async def delete_movie(
    request: MovieIdRequest, service: MovieServiceDep, settings: SettingsDep, timeout: TimeoutHeader = None
):
    logger.info(f"RPC DeleteMovie called id={request.id}")
    if not is_valid_movie_id(request.id):
        logger.warning(f"Invalid movie ID {request.id}")
        return RpcResponse(success=False, error="invalid movie ID", error_code=ErrorCode.INVALID_ARGUMENT)

    try:
        await _within_deadline(service.delete_movie(request.id), _deadline(settings, timeout))
    except DomainError as e:
        logger.error(f"Failed to delete movie {request.id}: {e}")
        return _failure(RpcResponse, e)

    return RpcResponse(success=True)
