from abc import ABC, abstractmethod
from typing import List, Tuple

from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.models.movie_filter import MovieFilter


class MovieServicePort(ABC):
    @abstractmethod
    async def get_movies(self, movie_filter: MovieFilter) -> Tuple[List[Movie], int]:
        pass

    @abstractmethod
    async def get_movie(self, movie_id: int) -> Movie:
        pass

    @abstractmethod
    async def create_movie(self, title: str, year: str) -> Movie:
        pass

    @abstractmethod
    async def delete_movie(self, movie_id: int) -> None:
        pass
