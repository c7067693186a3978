from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from movie_catalog.domain.exceptions import ValidationError

MIN_YEAR = 1800
MAX_YEARS_AHEAD = 10
INT32_MAX = 2**31 - 1


def is_valid_movie_id(movie_id: int) -> bool:
    return 1 <= movie_id <= INT32_MAX


def _check_year_format(year: str) -> int:
    if len(year) != 4 or not (year.isascii() and year.isdigit()):
        raise ValidationError("invalid year format")
    return int(year)


def check_movie_fields(title: str, year: str) -> None:
    """Raise ValidationError unless title and year satisfy the catalog rules.

    The year must be exactly four ASCII digits and fall within
    [1800, current year + 10].
    """
    if not title:
        raise ValidationError("title cannot be empty")

    if not year:
        raise ValidationError("year cannot be empty")

    year_int = _check_year_format(year)

    max_year = datetime.now().year + MAX_YEARS_AHEAD
    if year_int < MIN_YEAR or year_int > max_year:
        raise ValidationError(f"year must be between {MIN_YEAR} and {max_year}")


class Movie(BaseModel):
    id: int
    title: str
    year: str

    @classmethod
    def new(cls, id: int, title: str, year: str) -> "Movie":
        check_movie_fields(title, year)
        return cls(id=id, title=title, year=year)

    def ensure_valid(self) -> None:
        """Re-check a movie that may have been built without ``new``."""
        check_movie_fields(self.title, self.year)

    def update(self, title: Optional[str] = None, year: Optional[str] = None) -> None:
        """Apply non-empty fields, leaving the movie untouched if the result is invalid."""
        new_title = title or self.title
        new_year = self.year
        if year:
            _check_year_format(year)
            new_year = year

        check_movie_fields(new_title, new_year)

        self.title = new_title
        self.year = new_year
