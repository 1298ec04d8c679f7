"""
Film recommendation API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from film_recommender.api.dependencies import get_db, get_recommendation_service
from film_recommender.api.models.recommendation import (
    PageMeta,
    RecommendationItem,
    RecommendationResponse,
)
from film_recommender.core.recommendations import RecommendationError, RecommendationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/films", tags=["films"])


@router.get("/{film_id}/recommendations", response_model=RecommendationResponse)
def get_film_recommendations(
    film_id: str,
    limit: str | None = Query(None),
    offset: str | None = Query(None),
    db: Session = Depends(get_db),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Recommend same-genre films released within 15 years that are well reviewed."""
    # Parameters arrive as raw strings so the pipeline owns their validation
    try:
        result = service.recommend(db, film_id, raw_limit=limit, raw_offset=offset)
    except RecommendationError as e:
        if e.status_code >= 500:
            logger.error(f"Recommendations for film {film_id!r} failed: {e.message}")
        else:
            logger.info(f"Rejected recommendations request for film {film_id!r}: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return RecommendationResponse(
        recommendations=[RecommendationItem(**item) for item in result["recommendations"]],
        meta=PageMeta(**result["meta"]),
    )
