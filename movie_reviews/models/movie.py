from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from movie_reviews.database import Base

class Movie(Base):
    __tablename__ = "movies"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    abstract = Column(Text)  # Exposed as "content" in API responses
    image = Column(String(500))  # Poster URL or path
    
    # Relationships
    reviews = relationship("Review", back_populates="movie")

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}')>"
