from typing import List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

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
    BackendUnavailableError,
    DomainError,
    NotFoundError,
    RemoteCallError,
    ValidationError,
)
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.services.remote_movie_service_port import RemoteMovieServicePort
from movie_catalog.infrastructure.logging.logger import Logger

RPC_PREFIX = "/rpc/MovieService"
TIMEOUT_HEADER = "X-Request-Timeout"
# extra transport time so the backend can report its own deadline overrun
DEADLINE_MARGIN = 1.0

logger = Logger.get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=RpcResponse)

_ERRORS_BY_CODE: dict[ErrorCode, Type[DomainError]] = {
    ErrorCode.INVALID_ARGUMENT: ValidationError,
    ErrorCode.NOT_FOUND: NotFoundError,
    ErrorCode.ALREADY_EXISTS: AlreadyExistsError,
}


class HttpMovieServiceClient(RemoteMovieServicePort):
    """Calls the movies service RPC surface over a shared ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient, timeout: Optional[float] = None):
        self.client = client
        self.timeout = timeout

    @classmethod
    def from_address(cls, base_url: str, timeout: float) -> "HttpMovieServiceClient":
        client = httpx.AsyncClient(base_url=base_url, timeout=timeout + DEADLINE_MARGIN)
        logger.info(f"Movie service client configured for {base_url}")
        return cls(client, timeout=timeout)

    async def _call(self, method: str, request: BaseModel, response_cls: Type[ResponseT]) -> ResponseT:
        headers = {TIMEOUT_HEADER: str(self.timeout)} if self.timeout else {}
        try:
            response = await self.client.post(
                f"{RPC_PREFIX}/{method}", json=request.model_dump(), headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"RPC {method} returned HTTP {e.response.status_code}")
            raise RemoteCallError(f"movie service error: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"RPC {method} failed: {e!r}")
            raise BackendUnavailableError(f"failed to reach movie service: {e!r}") from e

        try:
            reply = response_cls.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise RemoteCallError(f"malformed reply from movie service for {method}") from e

        if not reply.success:
            logger.error(f"RPC {method}: movie service returned error: {reply.error}")
            error_cls = _ERRORS_BY_CODE.get(reply.error_code, RemoteCallError)
            raise error_cls(reply.error or "movie service error")

        return reply

    def _movie_from_reply(self, reply: MovieResponse) -> Movie:
        if reply.movie is None:
            raise RemoteCallError("movie service reply is missing the movie")
        return Movie(**reply.movie.model_dump())

    async def get_movies(self, page: int, limit: int) -> Tuple[List[Movie], int]:
        reply = await self._call("GetMovies", GetMoviesRequest(page=page, limit=limit), GetMoviesResponse)
        movies = [Movie(**movie.model_dump()) for movie in reply.movies]
        return movies, reply.total

    async def get_movie(self, movie_id: int) -> Movie:
        reply = await self._call("GetMovie", MovieIdRequest(id=movie_id), MovieResponse)
        return self._movie_from_reply(reply)

    async def create_movie(self, title: str, year: str) -> Movie:
        reply = await self._call("CreateMovie", CreateMovieRequest(title=title, year=year), MovieResponse)
        return self._movie_from_reply(reply)

    async def delete_movie(self, movie_id: int) -> None:
        await self._call("DeleteMovie", MovieIdRequest(id=movie_id), RpcResponse)

    async def close(self) -> None:
        await self.client.aclose()
