"""
Genre and release-window film recommendations.

This package contains:
- Request parameter validation
- Candidate selection from the film catalog
- The review provider client
- Review quality scoring
- Response assembly and pagination
- The pipeline orchestrator
"""

from film_recommender.core.recommendations.errors import (
    RecommendationError,
    ValidationError,
    InvalidMovieId,
    InvalidLimit,
    InvalidOffset,
    FilmNotFound,
    GenreLookupError,
    CatalogUnavailable,
    ReviewProviderError,
)
from film_recommender.core.recommendations.reviews import ReviewAggregate, ReviewProviderClient
from film_recommender.core.recommendations.service import RecommendationService

__all__ = [
    'RecommendationError',
    'ValidationError',
    'InvalidMovieId',
    'InvalidLimit',
    'InvalidOffset',
    'FilmNotFound',
    'GenreLookupError',
    'CatalogUnavailable',
    'ReviewProviderError',
    'ReviewAggregate',
    'ReviewProviderClient',
    'RecommendationService',
]
