"""Movie catalog use cases"""

import logging
from typing import List

from ...domain.entities.movie import Movie
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import MovieId
from ...domain.value_objects.movie_search import MovieSearchCriteria, Page
from ..dtos.movie_dtos import MovieDTO, MovieSearchDTO
from ...core.exceptions import NotFound


logger = logging.getLogger(__name__)


def _movie_from_dto(movie_id, dto: MovieDTO) -> Movie:
    return Movie(
        id=movie_id,
        title=dto.title,
        director=dto.director,
        rating=dto.rating,
        genres=set(dto.genres),
        release_date=dto.release_date,
        duration_minutes=dto.duration_minutes,
        plot=dto.plot,
        featured=dto.featured
    )


class MovieUseCases:
    """CRUD and search over the catalog"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def create(self, dto: MovieDTO) -> Movie:
        async with self.unit_of_work:
            movie = await self.unit_of_work.movies.add(_movie_from_dto(None, dto))
            await self.unit_of_work.commit()
        logger.info("Created movie %s: %s", movie.id.value, movie.title)
        return movie

    async def get(self, movie_id: MovieId) -> Movie:
        async with self.unit_of_work:
            movie = await self.unit_of_work.movies.get_by_id(movie_id)
        if not movie:
            raise NotFound(f"Movie not found with id: {movie_id.value}")
        return movie

    async def list_all(self) -> List[Movie]:
        async with self.unit_of_work:
            return await self.unit_of_work.movies.get_all()

    async def update(self, movie_id: MovieId, dto: MovieDTO) -> Movie:
        async with self.unit_of_work:
            if not await self.unit_of_work.movies.get_by_id(movie_id):
                raise NotFound(f"Movie not found with id: {movie_id.value}")
            movie = await self.unit_of_work.movies.update(_movie_from_dto(movie_id, dto))
            await self.unit_of_work.commit()
        logger.info("Updated movie %s", movie_id.value)
        return movie

    async def delete(self, movie_id: MovieId) -> None:
        async with self.unit_of_work:
            if not await self.unit_of_work.movies.get_by_id(movie_id):
                raise NotFound(f"Movie not found with id: {movie_id.value}")
            await self.unit_of_work.movies.delete(movie_id)
            await self.unit_of_work.commit()
        logger.info("Deleted movie %s", movie_id.value)

    async def search(self, dto: MovieSearchDTO) -> Page[Movie]:
        criteria = MovieSearchCriteria(
            title=dto.title,
            director=dto.director,
            genre=dto.genre,
            release_date_from=dto.release_year_start,
            release_date_to=dto.release_year_end,
            min_rating=dto.min_rating,
            featured=dto.featured,
            page=dto.page,
            size=dto.size,
            sort_by=dto.sort_by,
            ascending=dto.ascending
        )
        async with self.unit_of_work:
            return await self.unit_of_work.movies.search(criteria)
