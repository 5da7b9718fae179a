"""
Movie Routes - Movies with their aggregated reviews
"""

from fastapi import APIRouter, Depends, Path
from typing import List

from movie_reviews.database import Database, get_db
from movie_reviews.schemas.movie import MovieView
from movie_reviews.services.movie_service import MovieService

router = APIRouter(prefix="/posts", tags=["Movies"])


@router.get("", response_model=List[MovieView])
def list_movies(db: Database = Depends(get_db)):
    """
    Get all movies, each with the list of its reviews

    Movies without reviews have an empty **reviews** list.
    """
    return MovieService.list_movies(db)


@router.get("/{movie_id}", response_model=MovieView)
def get_movie(
    movie_id: str = Path(..., description="Movie ID"),
    db: Database = Depends(get_db)
):
    """
    Get a single movie with its reviews

    Returns 404 if the movie does not exist.
    """
    return MovieService.get_movie(db, movie_id)
