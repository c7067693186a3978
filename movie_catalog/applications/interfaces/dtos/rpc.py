from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic


class ErrorCode(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INTERNAL = "INTERNAL"


class GetMoviesRequest(BaseModel):
    page: int = 0
    limit: int = 0


class MovieIdRequest(BaseModel):
    id: int = 0


class CreateMovieRequest(BaseModel):
    title: str = ""
    year: str = ""


class RpcResponse(BaseModel):
    """Envelope shared by every RPC reply.

    Business failures travel as ``success=False`` with a reason in ``error``,
    so a transport failure can be told apart from a rejected request.
    """

    success: bool
    error: str = ""
    error_code: Optional[ErrorCode] = None


class GetMoviesResponse(RpcResponse):
    movies: List[MoviePublic] = []
    total: int = 0


class MovieResponse(RpcResponse):
    movie: Optional[MoviePublic] = None
