"""Movie repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.movie import Movie
from ..value_objects.entity_ids import MovieId
from ..value_objects.movie_search import MovieSearchCriteria, Page


class IMovieRepository(ABC):

    @abstractmethod
    async def get_by_id(self, movie_id: MovieId) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def search(self, criteria: MovieSearchCriteria) -> Page[Movie]:
        pass

    @abstractmethod
    async def add(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def delete(self, movie_id: MovieId) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
