import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from movie_reviews.database import Base, Database
from movie_reviews.main import create_app
from movie_reviews.models.movie import Movie
from movie_reviews.models.review import Review

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def database():
    """Database adapter over a fresh schema for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield Database(engine)


@pytest.fixture
def db_session(database):
    """ORM session used to seed and inspect rows."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(database):
    """FastAPI test client bound to the in-memory database."""
    app = create_app(database=database)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_movie(db_session):
    """Factory inserting a movie row."""

    def _make(title="Inception", abstract="Dreams within dreams", image="inception.jpg"):
        movie = Movie(title=title, abstract=abstract, image=image)
        db_session.add(movie)
        db_session.commit()
        db_session.refresh(movie)
        return movie

    return _make


@pytest.fixture
def make_review(db_session):
    """Factory inserting a review row for a movie."""

    def _make(movie, name="Anna", vote=4, text="Great"):
        review = Review(movie_id=movie.id, name=name, vote=vote, text=text)
        db_session.add(review)
        db_session.commit()
        db_session.refresh(review)
        return review

    return _make


@pytest.fixture
def review_count(db_session):
    """Current number of reviews stored for a movie id."""

    def _count(movie_id):
        db_session.expire_all()
        return db_session.query(Review).filter(Review.movie_id == movie_id).count()

    return _count
