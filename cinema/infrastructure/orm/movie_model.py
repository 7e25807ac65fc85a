"""Movie ORM Model"""

from sqlalchemy import Column, Integer, String, Date, Boolean, Float, ForeignKey
from sqlalchemy.orm import relationship

from ...db.models import Base


class MovieModel(Base):
    __tablename__ = 'movies'

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    director = Column(String(255), nullable=False, index=True)
    release_date = Column(Date, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    rating = Column(Float, nullable=False)
    plot = Column(String(1000), nullable=True)
    featured = Column(Boolean, default=False, nullable=False)

    genres = relationship(
        'MovieGenreModel',
        cascade='all, delete-orphan',
        lazy='selectin',
        order_by='MovieGenreModel.genre'
    )


class MovieGenreModel(Base):
    __tablename__ = 'movie_genres'

    movie_id = Column(Integer, ForeignKey('movies.id', ondelete='CASCADE'), primary_key=True)
    genre = Column(String(50), primary_key=True)
