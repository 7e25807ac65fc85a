"""Catalog search criteria"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, List, Generic, TypeVar


SORTABLE_FIELDS = ("id", "title", "director", "release_date", "rating", "duration_minutes")

T = TypeVar("T")


@dataclass(frozen=True)
class MovieSearchCriteria:
    title: Optional[str] = None
    director: Optional[str] = None
    genre: Optional[str] = None
    release_date_from: Optional[date] = None
    release_date_to: Optional[date] = None
    min_rating: Optional[float] = None
    featured: Optional[bool] = None
    page: int = 0
    size: int = 10
    sort_by: str = "title"
    ascending: bool = True

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be negative")
        if self.size < 1:
            raise ValueError("Page size must be at least 1")
        if self.sort_by not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by: {self.sort_by}")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size if self.size else 0
