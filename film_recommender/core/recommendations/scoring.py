"""
Review quality filtering and scoring.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

from film_recommender.core.recommendations.reviews import ReviewAggregate

MIN_REVIEW_COUNT = 5
MIN_AVERAGE_RATING = 4.0

_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class ScoredFilm:
    film_id: int
    average_rating: float
    review_count: int


def average_rating(ratings: Iterable[float]) -> float:
    """
    Mean of the ratings rounded half-up to two decimal places.

    Decimal arithmetic keeps values such as 4.125 from rounding down because
    of their binary float representation.
    """
    values = [Decimal(str(rating)) for rating in ratings]
    if not values:
        raise ValueError("Cannot average an empty rating list")
    mean = sum(values) / Decimal(len(values))
    return float(mean.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def score_candidates(
    aggregates: Dict[int, ReviewAggregate],
    min_review_count: int = MIN_REVIEW_COUNT,
    min_average_rating: float = MIN_AVERAGE_RATING
) -> List[ScoredFilm]:
    """
    Keep films with enough reviews and an average strictly above the threshold.

    Args:
        aggregates: Review aggregates keyed by film id
        min_review_count: Minimum number of reviews (inclusive)
        min_average_rating: Rating the average must exceed (exclusive)

    Returns:
        Qualifying films, in the iteration order of aggregates
    """
    scored = []
    for film_id, aggregate in aggregates.items():
        if aggregate.review_count < min_review_count:
            continue
        average = average_rating(aggregate.ratings)
        if average > min_average_rating:
            scored.append(ScoredFilm(
                film_id=film_id,
                average_rating=average,
                review_count=aggregate.review_count,
            ))
    return scored
