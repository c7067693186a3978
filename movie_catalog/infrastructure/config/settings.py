from typing import Type, TypeVar

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_catalog.domain.exceptions import ConfigurationError


def _require_non_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value.strip()


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    MONGODB_URI: str
    DATABASE_NAME: str = "movies_db"
    MAX_POOL_SIZE: int = 10
    RPC_HOST: str = "0.0.0.0"
    RPC_PORT: int = 50051
    STORE_TIMEOUT: float = 10.0
    REQUEST_TIMEOUT: float = 10.0

    @field_validator("MONGODB_URI", "DATABASE_NAME")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _require_non_blank(value)


class GatewaySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    MOVIE_SERVICE_ADDRESS: str
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080
    REQUEST_TIMEOUT: float = 10.0
    KEEP_ALIVE_TIMEOUT: int = 120

    @field_validator("MOVIE_SERVICE_ADDRESS")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _require_non_blank(value)

    @property
    def movie_service_url(self) -> str:
        address = self.MOVIE_SERVICE_ADDRESS.rstrip("/")
        if "://" not in address:
            address = f"http://{address}"
        return address


SettingsT = TypeVar("SettingsT", bound=BaseSettings)


def load_settings(settings_cls: Type[SettingsT]) -> SettingsT:
    """Build settings from the environment, failing fast on missing values."""
    try:
        return settings_cls()
    except PydanticValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationError(f"invalid {settings_cls.__name__} configuration: {fields}") from e
