"""
Pydantic schemas for API responses.
"""

from film_recommender.api.models.recommendation import (
    RecommendationResponse,
    RecommendationItem,
    PageMeta,
)

__all__ = [
    "RecommendationResponse",
    "RecommendationItem",
    "PageMeta",
]
