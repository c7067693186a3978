from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from fakes import InMemoryMovieRepository
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.remote_movie_service_port import RemoteMovieServicePort
from movie_catalog.gateway_app import app as gateway_app
from movie_catalog.infrastructure.config import gateway_dependencies, service_dependencies
from movie_catalog.infrastructure.config.settings import ServiceSettings
from movie_catalog.service_app import app as service_app


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for service testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_remote_movie_service():
    """Mock movies service port for gateway testing"""
    return AsyncMock(spec=RemoteMovieServicePort)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def in_memory_repository():
    return InMemoryMovieRepository()


@pytest.fixture
def service_settings():
    return ServiceSettings(MONGODB_URI="mongodb://unused:27017", REQUEST_TIMEOUT=5.0)


@pytest.fixture
def override_service_app(in_memory_repository, service_settings):
    """Wire the movies service app to the in-memory repository"""
    service_app.dependency_overrides[service_dependencies.get_movie_repository] = lambda: in_memory_repository
    service_app.dependency_overrides[service_dependencies.get_settings] = lambda: service_settings
    yield service_app
    service_app.dependency_overrides.clear()


@pytest.fixture
def service_client(override_service_app):
    return TestClient(override_service_app)


@pytest.fixture
def gateway_client(mock_remote_movie_service):
    gateway_app.dependency_overrides[gateway_dependencies.get_remote_movie_service] = lambda: mock_remote_movie_service
    yield TestClient(gateway_app)
    gateway_app.dependency_overrides.clear()
