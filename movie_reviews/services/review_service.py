"""
Review Service - Validation and persistence of new reviews
"""

from sqlalchemy import insert
from fastapi import HTTPException, status
import logging

from movie_reviews.database import Database
from movie_reviews.models.review import Review
from movie_reviews.schemas.review import ReviewCreate, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

MISSING_FIELDS_DETAIL = f"All fields are required: {', '.join(REQUIRED_FIELDS)}"


class ReviewService:
    """Service for review ingestion"""

    @staticmethod
    def add_review(db: Database, review_data: ReviewCreate) -> None:
        """
        Store a new review for a movie

        Args:
            db: Database
            review_data: movieId, name, vote and text as received

        Raises:
            HTTPException: 400 if a required field is missing (nothing is written)
            StoreError: If the insert fails
        """
        missing = review_data.missing_fields()
        if missing:
            logger.info(f"Rejected review, missing fields: {missing}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=MISSING_FIELDS_DETAIL
            )

        statement = insert(Review).values(
            movie_id=review_data.movie_id,
            name=review_data.name,
            vote=review_data.vote,
            text=review_data.text,
        )
        db.execute(statement)
        logger.info(f"Review added for movie {review_data.movie_id} by {review_data.name!r}")
