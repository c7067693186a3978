from abc import ABC, abstractmethod
from typing import List, Tuple

from movie_catalog.domain.models.movie import Movie


class RemoteMovieServicePort(ABC):
    """Contract for reaching the movies service from the gateway."""

    @abstractmethod
    async def get_movies(self, page: int, limit: int) -> Tuple[List[Movie], int]:
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

    @abstractmethod
    async def close(self) -> None:
        pass
