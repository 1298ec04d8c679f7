"""
Recommendation pipeline orchestrator.

Runs the stages in order, each one starting only after its predecessor has
returned, because every stage's input is derived from the previous output:

    validate -> select candidates -> fetch reviews -> score -> assemble
"""

import logging
from typing import Any, Dict, Optional, Protocol, Sequence

from sqlalchemy.orm import Session

from film_recommender.core.recommendations.assembly import assemble_response
from film_recommender.core.recommendations.candidates import select_candidates
from film_recommender.core.recommendations.reviews import ReviewAggregate
from film_recommender.core.recommendations.scoring import score_candidates
from film_recommender.core.recommendations.validation import validate_request

logger = logging.getLogger(__name__)


class ReviewProvider(Protocol):
    def fetch_reviews(self, film_ids: Sequence[int]) -> Dict[int, ReviewAggregate]:
        ...


class RecommendationService:
    """
    Computes recommendations for a single film per call.

    The catalog session and the review provider are injected; the service
    holds no per-request state and caches nothing between calls.

    Usage:
        service = RecommendationService(ReviewProviderClient(url))
        response = service.recommend(session, "7", limit="5")
    """

    def __init__(self, review_provider: ReviewProvider):
        self.review_provider = review_provider

    def recommend(
        self,
        session: Session,
        raw_id: str,
        raw_limit: Optional[str] = None,
        raw_offset: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Compute recommendations for one film.

        Args:
            session: Catalog database session
            raw_id: Film id as received in the request path
            raw_limit: Raw `limit` query parameter
            raw_offset: Raw `offset` query parameter

        Returns:
            Dictionary with `recommendations` and `meta`

        Raises:
            RecommendationError: Any stage failure; no partial result is returned
        """
        request = validate_request(raw_id, raw_limit, raw_offset)
        candidates = select_candidates(session, request.film_id)
        aggregates = self.review_provider.fetch_reviews(candidates.ids)
        scored = score_candidates(aggregates)
        response = assemble_response(scored, candidates, request.limit, request.offset)

        logger.info(
            f"Film {request.film_id}: {len(candidates.ids)} candidates, "
            f"{len(scored)} qualifying, returning {len(response['recommendations'])} "
            f"(limit={request.limit}, offset={request.offset})"
        )
        return response
