from typing import List

from pydantic import BaseModel, ConfigDict


class MovieSchema(BaseModel):
    title: str = ""
    year: str = ""


class MoviePublic(BaseModel):
    id: int
    title: str
    year: str
    model_config = ConfigDict(from_attributes=True)


class MovieList(BaseModel):
    movies: List[MoviePublic]
    total: int
