import json

import httpx
import pytest

from movie_catalog.domain.exceptions import (
    AlreadyExistsError,
    BackendUnavailableError,
    NotFoundError,
    RemoteCallError,
    ValidationError,
)
from movie_catalog.domain.models.movie import Movie
from movie_catalog.infrastructure.adapters.services.http_movie_service_client import (
    DEADLINE_MARGIN,
    TIMEOUT_HEADER,
    HttpMovieServiceClient,
)


class RecordingHandler:
    """httpx.MockTransport handler that replays a canned reply and records requests"""

    def __init__(self, status_code: int = 200, payload=None, error: Exception = None):
        self.status_code = status_code
        self.payload = payload
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, str):
            return httpx.Response(self.status_code, text=self.payload)
        return httpx.Response(self.status_code, json=self.payload)


def _client(handler: RecordingHandler, timeout: float = 5.0) -> HttpMovieServiceClient:
    transport = httpx.MockTransport(handler)
    return HttpMovieServiceClient(
        httpx.AsyncClient(transport=transport, base_url="http://movies-service:50051"), timeout=timeout
    )


class TestHttpMovieServiceClient:
    @pytest.mark.asyncio
    async def test_get_movies(self):
        handler = RecordingHandler(
            payload={
                "success": True,
                "movies": [{"id": 1, "title": "Alien", "year": "1979"}],
                "total": 7,
            }
        )
        client = _client(handler)

        movies, total = await client.get_movies(2, 5)

        assert movies == [Movie(id=1, title="Alien", year="1979")]
        assert total == 7
        request = handler.requests[0]
        assert request.url.path == "/rpc/MovieService/GetMovies"
        assert json.loads(request.content) == {"page": 2, "limit": 5}
        await client.close()

    @pytest.mark.asyncio
    async def test_call_carries_deadline_header(self):
        handler = RecordingHandler(payload={"success": True})
        client = _client(handler, timeout=2.5)

        await client.delete_movie(4)

        assert handler.requests[0].headers[TIMEOUT_HEADER] == "2.5"
        assert json.loads(handler.requests[0].content) == {"id": 4}

    @pytest.mark.asyncio
    async def test_create_movie(self):
        handler = RecordingHandler(payload={"success": True, "movie": {"id": 3, "title": "Heat", "year": "1995"}})
        client = _client(handler)

        movie = await client.create_movie("Heat", "1995")

        assert movie == Movie(id=3, title="Heat", year="1995")
        assert json.loads(handler.requests[0].content) == {"title": "Heat", "year": "1995"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error_code, expected",
        [
            ("INVALID_ARGUMENT", ValidationError),
            ("NOT_FOUND", NotFoundError),
            ("ALREADY_EXISTS", AlreadyExistsError),
            ("INTERNAL", RemoteCallError),
            (None, RemoteCallError),
        ],
    )
    async def test_error_reply_maps_to_domain_error(self, error_code, expected):
        handler = RecordingHandler(payload={"success": False, "error": "movie not found", "error_code": error_code})
        client = _client(handler)

        with pytest.raises(expected, match="movie not found"):
            await client.get_movie(1)

    @pytest.mark.asyncio
    async def test_http_error_status_is_remote_call_error(self):
        client = _client(RecordingHandler(status_code=500, payload={"detail": "boom"}))

        with pytest.raises(RemoteCallError) as exc_info:
            await client.get_movie(1)

        assert not isinstance(exc_info.value, BackendUnavailableError)

    @pytest.mark.asyncio
    async def test_connection_failure_is_backend_unavailable(self):
        client = _client(RecordingHandler(error=httpx.ConnectError("connection refused")))

        with pytest.raises(BackendUnavailableError):
            await client.get_movies(1, 10)

    @pytest.mark.asyncio
    async def test_timeout_is_backend_unavailable(self):
        client = _client(RecordingHandler(error=httpx.ReadTimeout("timed out")))

        with pytest.raises(BackendUnavailableError):
            await client.create_movie("Heat", "1995")

    @pytest.mark.asyncio
    async def test_malformed_reply(self):
        client = _client(RecordingHandler(payload="not json"))

        with pytest.raises(RemoteCallError, match="malformed reply"):
            await client.get_movies(1, 10)

    @pytest.mark.asyncio
    async def test_successful_reply_without_movie(self):
        client = _client(RecordingHandler(payload={"success": True}))

        with pytest.raises(RemoteCallError, match="missing the movie"):
            await client.get_movie(1)

    @pytest.mark.asyncio
    async def test_transport_outlasts_the_backend_deadline(self):
        client = HttpMovieServiceClient.from_address("http://movies-service:50051", timeout=10.0)

        assert client.timeout == 10.0
        assert client.client.timeout.read == 10.0 + DEADLINE_MARGIN
        await client.close()
