"""Movie DTOs"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Set
from datetime import date

from ...domain.value_objects.movie_search import SORTABLE_FIELDS


class MovieDTO(BaseModel):
    """Request DTO for creating or replacing a movie"""
    title: str = Field(..., min_length=1, max_length=255)
    director: str = Field(..., min_length=1, max_length=255)
    genres: Set[str] = Field(default_factory=set)
    release_date: Optional[date] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    rating: float = Field(..., gt=0)
    plot: Optional[str] = Field(default=None, max_length=1000)
    featured: bool = False

    @field_validator("title", "director")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("release_date")
    @classmethod
    def not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("Release date must be in the past or present")
        return value


class MovieResponseDTO(BaseModel):
    id: int
    title: str
    director: str
    genres: List[str]
    release_date: Optional[date] = None
    duration_minutes: Optional[int] = None
    rating: float
    plot: Optional[str] = None
    featured: bool

    @classmethod
    def from_entity(cls, movie):
        return cls(
            id=movie.id.value,
            title=movie.title,
            director=movie.director,
            genres=sorted(movie.genres),
            release_date=movie.release_date,
            duration_minutes=movie.duration_minutes,
            rating=movie.rating,
            plot=movie.plot,
            featured=movie.featured
        )


class MovieSearchDTO(BaseModel):
    """Search request; every filter is optional"""
    title: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None
    release_year_start: Optional[date] = None
    release_year_end: Optional[date] = None
    min_rating: Optional[float] = None
    featured: Optional[bool] = None
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1, le=100)
    sort_by: str = "title"
    ascending: bool = True

    @field_validator("sort_by")
    @classmethod
    def sortable(cls, value: str) -> str:
        if value not in SORTABLE_FIELDS:
            raise ValueError(f"sort_by must be one of: {', '.join(SORTABLE_FIELDS)}")
        return value


class MoviePageDTO(BaseModel):
    items: List[MovieResponseDTO]
    total: int
    page: int
    size: int
    total_pages: int
