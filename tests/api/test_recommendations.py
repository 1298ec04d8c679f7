"""
API tests for the film recommendations endpoint.

Uses FastAPI TestClient against the real app with the catalog session and the
review provider replaced through dependency overrides.
"""

import pytest
from datetime import date
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from film_recommender.api.main import app
from film_recommender.api.dependencies import get_db, get_review_client
from film_recommender.core.recommendations import ReviewAggregate, ReviewProviderError
from film_recommender.database.models import Base, Film, Genre

client = TestClient(app)


class FakeReviewProvider:
    """In-memory review provider recording the ids it was asked for."""

    def __init__(self, ratings=None, error=None):
        self.ratings = ratings or {}
        self.error = error
        self.calls = []

    def fetch_reviews(self, film_ids):
        self.calls.append(list(film_ids))
        if self.error is not None:
            raise self.error
        return {
            film_id: ReviewAggregate(film_id=film_id, ratings=list(ratings))
            for film_id, ratings in self.ratings.items()
            if film_id in film_ids
        }


@pytest.fixture
def db_session():
    """In-memory catalog shared across the TestClient's worker threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    session.add_all([
        Genre(id=1, name='Drama'),
        Genre(id=2, name='Comedy'),
        Genre(id=3, name='Western'),
        Film(id=7, title='The Source', release_date=date(2000, 6, 15), genre_id=1),
        Film(id=8, title='Eight', release_date=date(1995, 3, 1), genre_id=1),
        Film(id=9, title='Nine', release_date=date(2010, 1, 1), genre_id=1),
        Film(id=10, title='Ten', release_date=date(2015, 6, 15), genre_id=1),
        Film(id=11, title='Eleven', release_date=date(1985, 6, 14), genre_id=1),
        Film(id=12, title='Twelve', release_date=date(2001, 1, 1), genre_id=2),
        Film(id=20, title='Lonely', release_date=date(1950, 1, 1), genre_id=3),
    ])
    session.commit()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def provider():
    return FakeReviewProvider()


@pytest.fixture(autouse=True)
def overrides(db_session, provider):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_review_client] = lambda: provider
    yield
    app.dependency_overrides.clear()


class TestRecommendationEndpoint:
    """Tests for GET /films/{id}/recommendations."""

    def test_only_qualifying_film_returned(self, provider):
        """Film 8 qualifies; film 9 has too few reviews; film 7 has none."""
        provider.ratings = {8: [4, 5, 4, 5, 4, 5], 9: [5, 5, 5, 5]}

        r = client.get("/films/7/recommendations")

        assert r.status_code == 200
        assert r.json() == {
            "recommendations": [{
                "id": 8,
                "title": "Eight",
                "releaseDate": "1995-03-01",
                "genre": "Drama",
                "averageRating": 4.5,
                "reviewCount": 6,
            }],
            "meta": {"limit": 10, "offset": 0},
        }
        assert provider.calls == [[7, 8, 9, 10]]

    def test_pagination(self, provider):
        provider.ratings = {8: [5] * 5, 10: [4.5] * 7}

        r = client.get("/films/7/recommendations?limit=1&offset=1")

        assert r.status_code == 200
        data = r.json()
        assert [item["id"] for item in data["recommendations"]] == [10]
        assert data["meta"] == {"limit": 1, "offset": 1}

    def test_negative_pagination_ignored(self, provider):
        provider.ratings = {8: [5] * 5, 10: [4.5] * 7}

        r = client.get("/films/7/recommendations?limit=-3&offset=-1")

        assert r.status_code == 200
        data = r.json()
        assert data["meta"] == {"limit": 10, "offset": 0}
        assert [item["id"] for item in data["recommendations"]] == [8, 10]

    def test_no_genre_mates(self, provider):
        r = client.get("/films/20/recommendations?limit=3")

        assert r.status_code == 200
        assert r.json() == {"recommendations": [], "meta": {"limit": 3, "offset": 0}}

    def test_threshold_average_excluded(self, provider):
        provider.ratings = {8: [4] * 10}

        r = client.get("/films/7/recommendations")

        assert r.status_code == 200
        assert r.json()["recommendations"] == []

    def test_source_film_can_be_recommended(self, provider):
        provider.ratings = {7: [5] * 5}

        r = client.get("/films/7/recommendations")

        assert [item["id"] for item in r.json()["recommendations"]] == [7]

    def test_repeated_requests_identical(self, provider):
        provider.ratings = {8: [4.3] * 5, 9: [4.6, 4.7, 4.1, 4.9, 4.4], 10: [5] * 8}

        first = client.get("/films/7/recommendations?limit=2")
        second = client.get("/films/7/recommendations?limit=2")

        assert first.status_code == 200
        assert first.content == second.content

    def test_invalid_movie_id(self, provider):
        r = client.get("/films/abc/recommendations")

        assert r.status_code == 422
        assert "movie id" in r.json()["detail"].lower()
        assert provider.calls == []

    def test_invalid_limit(self):
        r = client.get("/films/7/recommendations?limit=ten")

        assert r.status_code == 422
        assert "limit" in r.json()["detail"].lower()

    def test_invalid_offset(self):
        r = client.get("/films/7/recommendations?offset=x")

        assert r.status_code == 422
        assert "offset" in r.json()["detail"].lower()

    def test_film_not_found(self, provider):
        r = client.get("/films/42/recommendations")

        assert r.status_code == 422
        assert "not found" in r.json()["detail"].lower()
        assert provider.calls == []

    def test_id_beyond_64_bits_not_found(self, provider):
        r = client.get("/films/99999999999999999999/recommendations")

        assert r.status_code == 422
        assert "not found" in r.json()["detail"].lower()
        assert provider.calls == []

    def test_non_ascii_digits_rejected(self):
        r = client.get("/films/٧/recommendations")

        assert r.status_code == 422
        assert "movie id" in r.json()["detail"].lower()

    def test_review_provider_unreachable(self, provider):
        provider.error = ReviewProviderError("Review provider request failed: connection refused")

        r = client.get("/films/7/recommendations")

        assert r.status_code == 500
        data = r.json()
        assert "review provider" in data["detail"].lower()
        assert "recommendations" not in data

    def test_unknown_route(self):
        assert client.get("/films/7").status_code == 404
        assert client.get("/movies/7/recommendations").status_code == 404


class TestRootEndpoint:

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health(self):
        r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["films"] == 7
        assert data["genres"] == 3

    def test_health_hides_database_error(self):
        broken = MagicMock()
        broken.query.side_effect = OperationalError(
            "SELECT count(films.id)", {}, Exception("unable to open database file /srv/db")
        )
        app.dependency_overrides[get_db] = lambda: broken

        r = client.get("/api/health")

        assert r.status_code == 200
        assert r.json() == {"status": "unhealthy", "database": "error"}
        assert "/srv/db" not in r.text
