"""
Review Schemas - Request body for review creation

Fields are deliberately untyped: presence is the only check applied,
values are stored as received.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List

REQUIRED_FIELDS = ("movieId", "name", "vote", "text")


class ReviewCreate(BaseModel):
    """Schema for POST /reviews"""
    movie_id: Any = Field(None, alias="movieId", description="ID of the reviewed movie")
    name: Any = Field(None, description="Reviewer name")
    vote: Any = Field(None, description="Rating given by the reviewer")
    text: Any = Field(None, description="Review body")

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty (null, "", 0, false)"""
        values = {
            "movieId": self.movie_id,
            "name": self.name,
            "vote": self.vote,
            "text": self.text,
        }
        return [field for field in REQUIRED_FIELDS if not values[field]]

    model_config = ConfigDict(populate_by_name=True)
