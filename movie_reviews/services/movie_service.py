"""
Movie Service - Movies joined with their reviews, aggregated per movie
"""

from sqlalchemy import select, func, literal_column
from fastapi import HTTPException, status
from typing import Any, Dict, List
import logging

from movie_reviews.database import Database
from movie_reviews.models.movie import Movie
from movie_reviews.models.review import Review
from movie_reviews.utils.reviews import parse_reviews

logger = logging.getLogger(__name__)

# Signed 64-bit bounds of an integer primary key
MIN_MOVIE_ID = -(2 ** 63)
MAX_MOVIE_ID = 2 ** 63 - 1


class MovieService:
    """Service for reading movies together with their reviews"""

    REVIEW_FIELDS = ("id", "name", "vote", "text")

    @staticmethod
    def _reviews_aggregate(dialect: str):
        """
        JSON array of {id, name, vote, text} objects, one per joined review.

        Each dialect spells JSON aggregation differently; the result is
        always handed to parse_reviews.
        """
        pairs = []
        for field in MovieService.REVIEW_FIELDS:
            pairs.append(literal_column(f"'{field}'"))
            pairs.append(getattr(Review, field))

        if dialect == "postgresql":
            return func.json_agg(func.json_build_object(*pairs))
        if dialect == "sqlite":
            return func.json_group_array(func.json_object(*pairs))
        return func.json_arrayagg(func.json_object(*pairs))

    @staticmethod
    def _aggregated_query(db: Database):
        return (
            select(
                Movie.id,
                Movie.title,
                Movie.abstract.label("content"),
                Movie.image,
                MovieService._reviews_aggregate(db.dialect_name).label("reviews"),
            )
            .select_from(Movie)
            .outerjoin(Review, Movie.id == Review.movie_id)
            .group_by(Movie.id)
        )

    @staticmethod
    def _normalize(row: Dict[str, Any]) -> Dict[str, Any]:
        movie = dict(row)
        movie["reviews"] = parse_reviews(movie.get("reviews"))
        return movie

    @staticmethod
    def list_movies(db: Database) -> List[Dict[str, Any]]:
        """
        Get every movie with its reviews

        Returns:
            One dict per movie: id, title, content, image, reviews
        """
        query = MovieService._aggregated_query(db).order_by(Movie.id)
        rows = db.fetch_all(query)
        return [MovieService._normalize(row) for row in rows]

    @staticmethod
    def get_movie(db: Database, movie_id: Any) -> Dict[str, Any]:
        """
        Get a single movie with its reviews

        Raises:
            HTTPException: 404 if no movie has this id
        """
        try:
            movie_id = int(movie_id)
        except (TypeError, ValueError):
            # A non-numeric id cannot match any movie
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")

        if not MIN_MOVIE_ID <= movie_id <= MAX_MOVIE_ID:
            # Out of range for an integer key; drivers refuse to bind it
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")

        query = MovieService._aggregated_query(db).where(Movie.id == movie_id)
        rows = db.fetch_all(query)

        if not rows:
            logger.debug(f"Movie {movie_id} not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")

        return MovieService._normalize(rows[0])
