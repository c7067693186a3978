from typing import List, Tuple

from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.models.movie import Movie, is_valid_movie_id
from movie_catalog.domain.models.movie_filter import normalize_limit, normalize_page
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.remote_movie_service_port import RemoteMovieServicePort


class GatewayMovieService:
    """Screens obviously invalid requests before they reach the movies service."""

    def __init__(self, remote_service: RemoteMovieServicePort, logger: LoggerPort):
        self.remote_service = remote_service
        self.logger = logger

    async def get_movies(self, page: int, limit: int) -> Tuple[List[Movie], int]:
        page = normalize_page(page)
        limit = normalize_limit(limit)
        self.logger.info(f"Getting movies page={page} limit={limit}")

        movies, total = await self.remote_service.get_movies(page, limit)

        self.logger.info(f"Retrieved {len(movies)} movies (total={total})")
        return movies, total

    async def get_movie(self, movie_id: int) -> Movie:
        self.logger.info(f"Getting movie {movie_id}")

        if not is_valid_movie_id(movie_id):
            raise ValidationError(f"invalid movie ID: {movie_id}")

        return await self.remote_service.get_movie(movie_id)

    async def create_movie(self, title: str, year: str) -> Movie:
        self.logger.info(f"Creating movie title='{title}' year='{year}'")

        if not title or not year:
            raise ValidationError("title and year are required")

        movie = await self.remote_service.create_movie(title, year)

        self.logger.info(f"Created movie {movie.id} '{movie.title}'")
        return movie

    async def delete_movie(self, movie_id: int) -> None:
        self.logger.info(f"Deleting movie {movie_id}")

        if not is_valid_movie_id(movie_id):
            raise ValidationError(f"invalid movie ID: {movie_id}")

        await self.remote_service.delete_movie(movie_id)
        self.logger.info(f"Deleted movie {movie_id}")
