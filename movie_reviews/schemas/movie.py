"""
Movie Schemas - Response models for the aggregated movie view
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class ReviewOut(BaseModel):
    """A review nested inside a movie"""
    id: int
    name: Optional[str] = None
    vote: Optional[Union[int, float]] = None
    text: Optional[str] = None


class MovieView(BaseModel):
    """Movie merged with all of its reviews"""
    id: int
    title: Optional[str] = None
    content: Optional[str] = Field(None, description="Movie abstract")
    image: Optional[str] = None
    reviews: List[ReviewOut] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Inception",
                "content": "A thief who steals corporate secrets through dream-sharing...",
                "image": "https://example.com/inception.jpg",
                "reviews": [
                    {"id": 3, "name": "Anna", "vote": 5, "text": "Mind-bending"}
                ]
            }
        }
    )
