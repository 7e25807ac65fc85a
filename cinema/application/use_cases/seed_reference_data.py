"""Startup seeding of roles and sample catalog entries"""

import logging
from datetime import date

from ...domain.entities.movie import Movie
from ...domain.enums import RoleName
from ...domain.repositories.unit_of_work import IUnitOfWork


logger = logging.getLogger(__name__)


SAMPLE_MOVIES = [
    Movie(
        id=None,
        title="The Shawshank Redemption",
        director="Frank Darabont",
        rating=9.3,
        genres={"Drama"},
        release_date=date(1994, 9, 23),
        duration_minutes=142,
        plot="Two imprisoned men bond over a number of years, finding solace and eventual redemption through acts of common decency.",
        featured=True
    ),
    Movie(
        id=None,
        title="The Godfather",
        director="Francis Ford Coppola",
        rating=9.2,
        genres={"Crime", "Drama"},
        release_date=date(1972, 3, 24),
        duration_minutes=175,
        plot="The aging patriarch of an organized crime dynasty transfers control of his clandestine empire to his reluctant son.",
        featured=True
    ),
    Movie(
        id=None,
        title="Pulp Fiction",
        director="Quentin Tarantino",
        rating=8.9,
        genres={"Crime", "Drama"},
        release_date=date(1994, 10, 14),
        duration_minutes=154,
        plot="The lives of two mob hitmen, a boxer, a gangster and his wife intertwine in four tales of violence and redemption.",
        featured=False
    ),
    Movie(
        id=None,
        title="The Dark Knight",
        director="Christopher Nolan",
        rating=9.0,
        genres={"Action", "Crime", "Drama"},
        release_date=date(2008, 7, 18),
        duration_minutes=152,
        plot="Batman faces the Joker, a criminal mastermind who wants to plunge Gotham City into anarchy.",
        featured=True
    ),
    Movie(
        id=None,
        title="Forrest Gump",
        director="Robert Zemeckis",
        rating=8.8,
        genres={"Drama", "Romance"},
        release_date=date(1994, 7, 6),
        duration_minutes=142,
        plot="The presidencies of Kennedy and Johnson and other historical events unfold from the perspective of an Alabama man.",
        featured=False
    ),
]


class SeedReferenceDataUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, seed_movies: bool = True) -> None:
        async with self.unit_of_work:
            if await self.unit_of_work.roles.count() == 0:
                for role in RoleName:
                    await self.unit_of_work.roles.add(role)
                logger.info("Seeded %d roles", len(RoleName))

            if seed_movies and await self.unit_of_work.movies.count() == 0:
                for sample in SAMPLE_MOVIES:
                    await self.unit_of_work.movies.add(Movie(
                        id=None,
                        title=sample.title,
                        director=sample.director,
                        rating=sample.rating,
                        genres=set(sample.genres),
                        release_date=sample.release_date,
                        duration_minutes=sample.duration_minutes,
                        plot=sample.plot,
                        featured=sample.featured
                    ))
                logger.info("Seeded %d sample movies", len(SAMPLE_MOVIES))

            await self.unit_of_work.commit()
