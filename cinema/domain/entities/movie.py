"""Movie catalog entity"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Set

from ..value_objects.entity_ids import MovieId


@dataclass
class Movie:
    id: Optional[MovieId]
    title: str
    director: str
    rating: float
    genres: Set[str] = field(default_factory=set)
    release_date: Optional[date] = None
    duration_minutes: Optional[int] = None
    plot: Optional[str] = None
    featured: bool = False

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Title is required")
        if not self.director or not self.director.strip():
            raise ValueError("Director is required")
        if self.rating is None or self.rating <= 0:
            raise ValueError("Rating must be positive")
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValueError("Duration must be positive")
