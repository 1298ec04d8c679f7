"""
Client for the external review provider.

The provider is queried with a comma-joined list of film ids and answers with
a JSON list of per-film review entries:

    [{"film_id": 8, "reviews": [{"rating": 4.5, ...}, ...]}, ...]
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import requests
from pydantic import BaseModel, FiniteFloat, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from film_recommender.core.recommendations.errors import ReviewProviderError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ProviderReview(BaseModel):
    rating: FiniteFloat


class ProviderEntry(BaseModel):
    film_id: int
    reviews: List[ProviderReview]


_PAYLOAD_ADAPTER = TypeAdapter(List[ProviderEntry])


@dataclass
class ReviewAggregate:
    """All ratings the provider reported for one film."""

    film_id: int
    ratings: List[float] = field(default_factory=list)

    @property
    def review_count(self) -> int:
        return len(self.ratings)


def parse_reviews_payload(payload, film_ids: Sequence[int]) -> Dict[int, ReviewAggregate]:
    """
    Convert a decoded provider response into review aggregates.

    Entries for films that were not requested are dropped; repeated entries
    for one film are merged.

    Args:
        payload: Decoded JSON body
        film_ids: Film ids that were requested

    Returns:
        Mapping of film id to ReviewAggregate

    Raises:
        ReviewProviderError: If the payload does not have the expected shape
    """
    try:
        entries = _PAYLOAD_ADAPTER.validate_python(payload)
    except PydanticValidationError as e:
        raise ReviewProviderError(
            f"Review provider returned a malformed response ({e.error_count()} errors)"
        ) from e

    requested = set(film_ids)
    aggregates: Dict[int, ReviewAggregate] = {}
    for entry in entries:
        if entry.film_id not in requested:
            continue
        aggregate = aggregates.setdefault(entry.film_id, ReviewAggregate(film_id=entry.film_id))
        aggregate.ratings.extend(review.rating for review in entry.reviews)
    return aggregates


class ReviewProviderClient:
    """
    HTTP client for the review provider.

    Usage:
        client = ReviewProviderClient("http://reviews.example.com/api")
        aggregates = client.fetch_reviews([7, 8, 9])
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            base_url: Provider endpoint; ids are sent in the `films` query parameter
            timeout: Seconds to wait for the provider before giving up
        """
        self.base_url = base_url
        self.timeout = timeout

    def fetch_reviews(self, film_ids: Sequence[int]) -> Dict[int, ReviewAggregate]:
        """
        Fetch review aggregates for the given films in a single request.

        Args:
            film_ids: Ordered candidate film ids

        Returns:
            Mapping of film id to ReviewAggregate for films the provider knows

        Raises:
            ReviewProviderError: On connection failure, timeout, error status
                or malformed body. Requests are not retried.
        """
        if not film_ids:
            return {}

        params = {"films": ",".join(str(film_id) for film_id in film_ids)}
        logger.debug(f"Fetching reviews for {len(film_ids)} films from {self.base_url}")
        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            logger.error(f"Review provider timed out after {self.timeout}s")
            raise ReviewProviderError(
                f"Review provider timed out after {self.timeout}s"
            ) from e
        except requests.RequestException as e:
            logger.error(f"Review provider request failed: {e}")
            raise ReviewProviderError(f"Review provider request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Review provider returned a non-JSON body")
            raise ReviewProviderError("Review provider returned invalid JSON") from e

        return parse_reviews_payload(payload, film_ids)
