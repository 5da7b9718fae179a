"""
Review submission endpoint
"""
import pytest

VALID_REVIEW = {"name": "A", "vote": 5, "text": "Good"}


def test_add_review(client, make_movie):
    movie = make_movie()

    response = client.post("/reviews", json={"movieId": movie.id, **VALID_REVIEW})

    assert response.status_code == 201
    assert response.text == "Review added successfully"

    reviews = client.get(f"/posts/{movie.id}").json()["reviews"]
    assert len(reviews) == 1
    assert reviews[0]["name"] == "A"
    assert reviews[0]["vote"] == 5
    assert reviews[0]["text"] == "Good"
    assert isinstance(reviews[0]["id"], int)


def test_missing_text_rejected_without_insert(client, make_movie, review_count):
    movie = make_movie()

    response = client.post("/reviews", json={"movieId": movie.id, "name": "A", "vote": 5})

    assert response.status_code == 400
    assert response.text == "All fields are required: movieId, name, vote, text"
    assert review_count(movie.id) == 0


@pytest.mark.parametrize("field", ["movieId", "name", "vote", "text"])
def test_each_field_is_required(client, make_movie, review_count, field):
    movie = make_movie()
    payload = {"movieId": movie.id, **VALID_REVIEW}
    del payload[field]

    response = client.post("/reviews", json=payload)

    assert response.status_code == 400
    assert review_count(movie.id) == 0


@pytest.mark.parametrize("field,empty", [
    ("name", ""),
    ("text", ""),
    ("text", None),
    ("vote", 0),
    ("movieId", 0),
])
def test_empty_values_count_as_missing(client, make_movie, review_count, field, empty):
    movie = make_movie()
    payload = {"movieId": movie.id, **VALID_REVIEW, field: empty}

    response = client.post("/reviews", json=payload)

    assert response.status_code == 400
    assert review_count(movie.id) == 0


def test_empty_object_rejected(client):
    response = client.post("/reviews", json={})

    assert response.status_code == 400


def test_invalid_json_rejected(client):
    response = client.post(
        "/reviews",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_vote_is_stored_without_range_check(client, make_movie):
    movie = make_movie()

    response = client.post("/reviews", json={"movieId": movie.id, "name": "B", "vote": 42, "text": "Off the scale"})

    assert response.status_code == 201
    assert client.get(f"/posts/{movie.id}").json()["reviews"][0]["vote"] == 42


def test_two_reviews_for_same_movie_both_stored(client, make_movie, review_count):
    movie = make_movie()

    first = client.post("/reviews", json={"movieId": movie.id, "name": "A", "vote": 3, "text": "Fine"})
    second = client.post("/reviews", json={"movieId": movie.id, "name": "B", "vote": 4, "text": "Nice"})

    assert first.status_code == second.status_code == 201
    assert review_count(movie.id) == 2
    names = {r["name"] for r in client.get(f"/posts/{movie.id}").json()["reviews"]}
    assert names == {"A", "B"}


def test_oversized_movie_id_is_store_error(client, make_movie):
    make_movie()

    response = client.post("/reviews", json={"movieId": 10 ** 20, **VALID_REVIEW})

    assert response.status_code == 500
    assert response.text == "Server error"
