"""
Review Routes - Review submission
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from movie_reviews.database import Database, get_db
from movie_reviews.schemas.review import ReviewCreate
from movie_reviews.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
def add_review(
    review_data: ReviewCreate,
    db: Database = Depends(get_db)
):
    """
    Add a review to a movie

    - **movieId**: ID of the movie (required)
    - **name**: Reviewer name (required)
    - **vote**: Rating (required)
    - **text**: Review body (required)
    """
    ReviewService.add_review(db, review_data)
    return PlainTextResponse("Review added successfully", status_code=status.HTTP_201_CREATED)
