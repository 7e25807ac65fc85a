"""Movie repository implementation with criteria search"""

from typing import Optional, List
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...domain.entities.movie import Movie
from ...domain.repositories.movie_repository import IMovieRepository
from ...domain.value_objects.entity_ids import MovieId
from ...domain.value_objects.movie_search import MovieSearchCriteria, Page
from ..orm.movie_model import MovieModel, MovieGenreModel


class MovieRepositoryImpl(IMovieRepository):
    """Repository implementation for the movie catalog"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, movie_id: MovieId) -> Optional[Movie]:
        model = self.session.get(MovieModel, movie_id.value)
        return self._map_to_entity(model) if model else None

    async def get_all(self) -> List[Movie]:
        models = self.session.query(MovieModel).order_by(MovieModel.id).all()
        return [self._map_to_entity(model) for model in models]

    async def search(self, criteria: MovieSearchCriteria) -> Page[Movie]:
        """Filter, sort and paginate; every criterion is optional"""
        query = self.session.query(MovieModel)

        if criteria.title:
            query = query.filter(func.lower(MovieModel.title).contains(criteria.title.lower()))
        if criteria.director:
            query = query.filter(func.lower(MovieModel.director).contains(criteria.director.lower()))
        if criteria.genre:
            # EXISTS keeps one row per movie even when several genres match
            query = query.filter(MovieModel.genres.any(
                func.lower(MovieGenreModel.genre).contains(criteria.genre.lower())
            ))
        if criteria.release_date_from:
            query = query.filter(MovieModel.release_date >= criteria.release_date_from)
        if criteria.release_date_to:
            query = query.filter(MovieModel.release_date <= criteria.release_date_to)
        if criteria.min_rating is not None:
            query = query.filter(MovieModel.rating >= criteria.min_rating)
        if criteria.featured is not None:
            query = query.filter(MovieModel.featured == criteria.featured)

        total = query.count()

        sort_column = getattr(MovieModel, criteria.sort_by)
        order = sort_column.asc() if criteria.ascending else sort_column.desc()
        models = (
            query.order_by(order, MovieModel.id.asc())
            .offset(criteria.page * criteria.size)
            .limit(criteria.size)
            .all()
        )

        return Page(
            items=[self._map_to_entity(model) for model in models],
            total=total,
            page=criteria.page,
            size=criteria.size
        )

    async def add(self, movie: Movie) -> Movie:
        model = MovieModel()
        self._update_model_from_entity(model, movie)
        self.session.add(model)
        self.session.flush()

        movie.id = MovieId(model.id)
        return movie

    async def update(self, movie: Movie) -> Movie:
        model = self.session.get(MovieModel, movie.id.value)
        if model:
            self._update_model_from_entity(model, movie)
            self.session.flush()
        return movie

    async def delete(self, movie_id: MovieId) -> None:
        model = self.session.get(MovieModel, movie_id.value)
        if model:
            self.session.delete(model)
            self.session.flush()

    async def count(self) -> int:
        return self.session.query(MovieModel).count()

    def _update_model_from_entity(self, model: MovieModel, movie: Movie) -> None:
        model.title = movie.title
        model.director = movie.director
        model.release_date = movie.release_date
        model.duration_minutes = movie.duration_minutes
        model.rating = movie.rating
        model.plot = movie.plot
        model.featured = movie.featured

        wanted = set(movie.genres)
        for row in list(model.genres):
            if row.genre not in wanted:
                model.genres.remove(row)
        current = {g.genre for g in model.genres}
        for genre in sorted(wanted - current):
            model.genres.append(MovieGenreModel(genre=genre))

    def _map_to_entity(self, model: MovieModel) -> Movie:
        return Movie(
            id=MovieId(model.id),
            title=model.title,
            director=model.director,
            rating=model.rating,
            genres={g.genre for g in model.genres},
            release_date=model.release_date,
            duration_minutes=model.duration_minutes,
            plot=model.plot,
            featured=model.featured
        )
