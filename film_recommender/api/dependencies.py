"""
FastAPI dependency injection for database session and recommendation service.
"""

import logging
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from film_recommender.database.connection import get_db_manager
from film_recommender.core.recommendations import RecommendationService, ReviewProviderClient
from film_recommender.api.config import (
    get_database_path,
    get_reviews_api_timeout,
    get_reviews_api_url,
)

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


# Singleton review client; it is stateless between requests
_review_client: ReviewProviderClient | None = None


def get_review_client() -> ReviewProviderClient:
    """Get or create singleton ReviewProviderClient."""
    global _review_client
    if _review_client is None:
        _review_client = ReviewProviderClient(
            base_url=get_reviews_api_url(),
            timeout=get_reviews_api_timeout(),
        )
        logger.info(f"Review provider: {_review_client.base_url} (timeout {_review_client.timeout}s)")
    return _review_client


def get_recommendation_service(
    review_client: ReviewProviderClient = Depends(get_review_client),
) -> RecommendationService:
    """Build the recommendation pipeline around the injected review client."""
    return RecommendationService(review_client)
