from abc import ABC, abstractmethod
from typing import List

from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.models.movie_filter import MovieFilter


class MovieRepository(ABC):
    @abstractmethod
    async def find_all(self, movie_filter: MovieFilter) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_id(self, movie_id: int) -> Movie:
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def exists_by_id(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def get_next_id(self) -> int:
        pass
