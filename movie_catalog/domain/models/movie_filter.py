from pydantic import BaseModel

from movie_catalog.domain.models.movie import INT32_MAX

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def normalize_page(page: int) -> int:
    # pages are 32-bit like ids, so skip always fits the store's 64-bit ints
    if page < 1:
        return DEFAULT_PAGE
    return min(page, INT32_MAX)


def normalize_limit(limit: int) -> int:
    return limit if 1 <= limit <= MAX_LIMIT else DEFAULT_LIMIT


class MovieFilter(BaseModel):
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def normalized(self) -> "MovieFilter":
        return MovieFilter(page=normalize_page(self.page), limit=normalize_limit(self.limit))
