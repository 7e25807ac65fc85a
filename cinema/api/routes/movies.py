"""Movie catalog routes"""

from fastapi import APIRouter, Depends, Path, Response, status
from typing import List

from ...application.use_cases.movie_use_cases import MovieUseCases
from ...application.dtos.movie_dtos import MovieDTO, MovieResponseDTO, MovieSearchDTO, MoviePageDTO
from ...api.dependencies import get_unit_of_work, get_catalog_editor, get_current_admin_user
from ...domain.entities.user import User
from ...domain.value_objects.entity_ids import MovieId


router = APIRouter()


@router.get("", response_model=List[MovieResponseDTO])
async def list_movies(unit_of_work = Depends(get_unit_of_work)):
    movies = await MovieUseCases(unit_of_work).list_all()
    return [MovieResponseDTO.from_entity(m) for m in movies]


@router.post("", response_model=MovieResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_movie(
    movie_data: MovieDTO,
    current_user: User = Depends(get_catalog_editor),
    unit_of_work = Depends(get_unit_of_work)
):
    movie = await MovieUseCases(unit_of_work).create(movie_data)
    return MovieResponseDTO.from_entity(movie)


@router.post("/search", response_model=MoviePageDTO)
async def search_movies(
    search: MovieSearchDTO,
    unit_of_work = Depends(get_unit_of_work)
):
    """Filtered, sorted and paginated catalog search"""
    page = await MovieUseCases(unit_of_work).search(search)
    return MoviePageDTO(
        items=[MovieResponseDTO.from_entity(m) for m in page.items],
        total=page.total,
        page=page.page,
        size=page.size,
        total_pages=page.total_pages
    )


@router.get("/{movie_id}", response_model=MovieResponseDTO)
async def get_movie(movie_id: int = Path(..., gt=0), unit_of_work = Depends(get_unit_of_work)):
    movie = await MovieUseCases(unit_of_work).get(MovieId(movie_id))
    return MovieResponseDTO.from_entity(movie)


@router.put("/{movie_id}", response_model=MovieResponseDTO)
async def update_movie(
    movie_data: MovieDTO,
    movie_id: int = Path(..., gt=0),
    current_user: User = Depends(get_catalog_editor),
    unit_of_work = Depends(get_unit_of_work)
):
    movie = await MovieUseCases(unit_of_work).update(MovieId(movie_id), movie_data)
    return MovieResponseDTO.from_entity(movie)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(
    movie_id: int = Path(..., gt=0),
    current_user: User = Depends(get_current_admin_user),
    unit_of_work = Depends(get_unit_of_work)
):
    await MovieUseCases(unit_of_work).delete(MovieId(movie_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
