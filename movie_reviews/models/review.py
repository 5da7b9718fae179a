from sqlalchemy import Column, Integer, String, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from movie_reviews.database import Base

class Review(Base):
    """
    Review model - Written once through POST /reviews, never updated or deleted
    """
    __tablename__ = "reviews"
    
    id = Column(Integer, primary_key=True, index=True)
    movie_id = Column(Integer, ForeignKey("movies.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # Reviewer name
    vote = Column(Numeric(asdecimal=False), nullable=False)  # Integral votes stay integers
    text = Column(Text, nullable=False)
    
    # Relationships
    movie = relationship("Movie", back_populates="reviews")

    def __repr__(self):
        return f"<Review(id={self.id}, movie_id={self.movie_id}, vote={self.vote})>"
