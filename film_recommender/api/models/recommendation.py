"""
Pydantic schemas for Recommendation API.

Fields are snake_case in Python and camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecommendationItem(BaseModel):
    """Single recommended film with its review statistics."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    release_date: date
    genre: str
    average_rating: float
    review_count: int


class PageMeta(BaseModel):
    """Pagination parameters actually applied."""

    limit: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)


class RecommendationResponse(BaseModel):
    """Response model for recommendations list."""

    recommendations: list[RecommendationItem]
    meta: PageMeta
