from pydantic import BaseModel, Field, field_validator

from movie_catalog.domain.models.movie_filter import DEFAULT_LIMIT, DEFAULT_PAGE


class FilterPage(BaseModel):
    # Out-of-range values are coerced by the services rather than rejected
    page: int = Field(default=DEFAULT_PAGE, description="1-based page number")
    limit: int = Field(default=DEFAULT_LIMIT, description="Maximum number of items to return (1-100)")

    @field_validator("page", "limit", mode="before")
    @classmethod
    def default_when_unparsable(cls, value, info):
        try:
            return int(value)
        except (TypeError, ValueError):
            return cls.model_fields[info.field_name].default
