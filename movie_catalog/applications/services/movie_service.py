from typing import List, Tuple

from movie_catalog.domain.exceptions import AlreadyExistsError, NotFoundError, RepositoryError, ValidationError
from movie_catalog.domain.models.movie import Movie, is_valid_movie_id
from movie_catalog.domain.models.movie_filter import MovieFilter
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort


class MovieService(MovieServicePort):
    """Business rules for the movie catalog.

    Holds no state between calls; everything lives in the repository. Id
    assignment reads the current maximum and inserts max + 1, which is not
    atomic. Two concurrent creations may pick the same id, in which case the
    store's unique ``_id`` rejects one of them with ``AlreadyExistsError``.
    """

    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def get_movies(self, movie_filter: MovieFilter) -> Tuple[List[Movie], int]:
        movie_filter = movie_filter.normalized()
        self.logger.info(f"Getting movies with page={movie_filter.page} limit={movie_filter.limit}")

        try:
            movies = await self.movie_repository.find_all(movie_filter)
        except RepositoryError as e:
            self.logger.error(f"Failed to get movies: {e}")
            raise RepositoryError(f"failed to get movies: {e}") from e

        try:
            total = await self.movie_repository.count()
        except RepositoryError as e:
            # the page is still returned without a total
            self.logger.error(f"Failed to count movies: {e}")
            return movies, 0

        self.logger.info(f"Retrieved {len(movies)} movies (total={total})")
        return movies, total

    async def get_movie(self, movie_id: int) -> Movie:
        self.logger.info(f"Getting movie by ID {movie_id}")

        if not is_valid_movie_id(movie_id):
            raise ValidationError("invalid movie data")

        try:
            movie = await self.movie_repository.find_by_id(movie_id)
        except RepositoryError as e:
            self.logger.error(f"Failed to get movie {movie_id}: {e}")
            raise RepositoryError(f"failed to get movie with id {movie_id}: {e}") from e

        self.logger.info(f"Retrieved movie {movie_id} '{movie.title}'")
        return movie

    async def create_movie(self, title: str, year: str) -> Movie:
        self.logger.info(f"Creating new movie title='{title}' year='{year}'")

        try:
            next_id = await self.movie_repository.get_next_id()
        except RepositoryError as e:
            self.logger.error(f"Failed to get next ID: {e}")
            raise RepositoryError(f"failed to generate movie ID: {e}") from e

        try:
            movie = Movie.new(next_id, title, year)
        except ValidationError as e:
            self.logger.warning(f"Invalid movie data title='{title}' year='{year}': {e}")
            raise ValidationError(f"invalid movie data: {e}") from e

        try:
            exists = await self.movie_repository.exists_by_id(movie.id)
        except RepositoryError as e:
            self.logger.error(f"Failed to check movie existence for {movie.id}: {e}")
            raise RepositoryError(f"failed to check movie existence: {e}") from e
        if exists:
            raise AlreadyExistsError("movie already exists")

        try:
            created_movie = await self.movie_repository.create(movie)
        except RepositoryError as e:
            self.logger.error(f"Failed to create movie {movie.id}: {e}")
            raise RepositoryError(f"failed to create movie: {e}") from e

        self.logger.info(f"Created movie {created_movie.id} '{created_movie.title}'")
        return created_movie

    async def delete_movie(self, movie_id: int) -> None:
        self.logger.info(f"Deleting movie {movie_id}")

        if not is_valid_movie_id(movie_id):
            raise ValidationError("invalid movie data")

        try:
            exists = await self.movie_repository.exists_by_id(movie_id)
        except RepositoryError as e:
            self.logger.error(f"Failed to check movie existence for {movie_id}: {e}")
            raise RepositoryError(f"failed to check movie existence: {e}") from e
        if not exists:
            raise NotFoundError("movie not found")

        try:
            await self.movie_repository.delete(movie_id)
        except RepositoryError as e:
            self.logger.error(f"Failed to delete movie {movie_id}: {e}")
            raise RepositoryError(f"failed to delete movie with id {movie_id}: {e}") from e

        self.logger.info(f"Deleted movie {movie_id}")
