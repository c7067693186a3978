from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from movie_catalog.applications.interfaces.dtos.filter_page import FilterPage
from movie_catalog.applications.interfaces.dtos.movie import MovieList, MoviePublic, MovieSchema
from movie_catalog.applications.services.gateway_movie_service import GatewayMovieService
from movie_catalog.domain.exceptions import (
    AlreadyExistsError,
    BackendUnavailableError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from movie_catalog.infrastructure.config.gateway_dependencies import get_gateway_movie_service

router = APIRouter(prefix="/api/v1/movies", tags=["movies"])

GatewayMovieServiceDep = Annotated[GatewayMovieService, Depends(get_gateway_movie_service)]


def _http_error(error: DomainError) -> HTTPException:
    if isinstance(error, ValidationError):
        status = HTTPStatus.BAD_REQUEST
    elif isinstance(error, NotFoundError):
        status = HTTPStatus.NOT_FOUND
    elif isinstance(error, AlreadyExistsError):
        status = HTTPStatus.CONFLICT
    elif isinstance(error, BackendUnavailableError):
        status = HTTPStatus.SERVICE_UNAVAILABLE
    else:
        status = HTTPStatus.INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status, detail=str(error))


@router.get("", response_model=MovieList)
async def read_movies(filter_movies: Annotated[FilterPage, Query()], service: GatewayMovieServiceDep):
    try:
        movies, total = await service.get_movies(filter_movies.page, filter_movies.limit)
    except DomainError as e:
        raise _http_error(e)
    return MovieList(movies=[MoviePublic.model_validate(movie) for movie in movies], total=total)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: int, service: GatewayMovieServiceDep):
    try:
        movie = await service.get_movie(movie_id)
    except DomainError as e:
        raise _http_error(e)
    return MoviePublic.model_validate(movie)


@router.post("", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: MovieSchema, service: GatewayMovieServiceDep):
    try:
        created = await service.create_movie(movie.title, movie.year)
    except DomainError as e:
        raise _http_error(e)
    return MoviePublic.model_validate(created)


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
async def delete_movie(movie_id: int, service: GatewayMovieServiceDep):
    try:
        await service.delete_movie(movie_id)
    except DomainError as e:
        raise _http_error(e)
    return Response(status_code=HTTPStatus.NO_CONTENT)
