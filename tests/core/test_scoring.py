"""
Unit tests for review quality filtering and scoring.
"""

import pytest

from film_recommender.core.recommendations.reviews import ReviewAggregate
from film_recommender.core.recommendations.scoring import (
    ScoredFilm,
    average_rating,
    score_candidates,
)


def aggregates(**ratings_by_film):
    """Build aggregates from keyword args like f8=[5, 4]."""
    result = {}
    for key, ratings in ratings_by_film.items():
        film_id = int(key[1:])
        result[film_id] = ReviewAggregate(film_id=film_id, ratings=list(ratings))
    return result


class TestAverageRating:

    def test_simple_mean(self):
        assert average_rating([4, 5]) == 4.5

    def test_rounds_half_up(self):
        # 4.125 and 4.005 round down with binary floats and banker's rounding
        assert average_rating([4.125]) == 4.13
        assert average_rating([4.005]) == 4.01
        assert average_rating([4, 4, 4, 4, 4.025]) == 4.01

    def test_repeating_fraction(self):
        assert average_rating([4, 4, 5]) == 4.33

    def test_empty(self):
        with pytest.raises(ValueError):
            average_rating([])


class TestScoreCandidates:

    def test_qualifying_film(self):
        scored = score_candidates(aggregates(f8=[4, 5, 4, 5, 4, 5]))
        assert scored == [ScoredFilm(film_id=8, average_rating=4.5, review_count=6)]

    def test_too_few_reviews(self):
        assert score_candidates(aggregates(f9=[5, 5, 5, 5])) == []

    def test_exactly_five_reviews_qualify(self):
        assert [s.film_id for s in score_candidates(aggregates(f9=[5] * 5))] == [9]

    def test_exactly_four_is_excluded(self):
        assert score_candidates(aggregates(f8=[4] * 6)) == []

    def test_rounded_average_at_threshold_is_excluded(self):
        # 4.004 rounds to 4.0
        assert score_candidates(aggregates(f8=[4, 4, 4, 4, 4.02])) == []

    def test_just_above_threshold(self):
        scored = score_candidates(aggregates(f8=[4, 4, 4, 4, 4.05]))
        assert scored == [ScoredFilm(film_id=8, average_rating=4.01, review_count=5)]

    def test_no_reviews(self):
        assert score_candidates({}) == []
        assert score_candidates(aggregates(f7=[])) == []

    def test_custom_thresholds(self):
        scored = score_candidates(aggregates(f8=[3, 4]), min_review_count=2, min_average_rating=3.0)
        assert [s.film_id for s in scored] == [8]
