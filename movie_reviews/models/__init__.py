"""
Import all models to ensure they are registered with SQLAlchemy
"""
from movie_reviews.models.movie import Movie
from movie_reviews.models.review import Review

__all__ = [
    "Movie",
    "Review"
]
