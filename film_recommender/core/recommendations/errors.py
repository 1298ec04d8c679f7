"""
Error types raised by the recommendation pipeline.

Every error carries the HTTP status the API layer should answer with and a
human-readable message.
"""


class RecommendationError(Exception):
    """Base class for all recommendation pipeline errors."""

    status_code = 500
    default_message = "Recommendation request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RecommendationError):
    """Raised when request parameters cannot be parsed."""

    status_code = 422
    default_message = "Invalid request parameters"


class InvalidMovieId(ValidationError):
    default_message = "Invalid movie id"


class InvalidLimit(ValidationError):
    default_message = "Invalid limit parameter"


class InvalidOffset(ValidationError):
    default_message = "Invalid offset parameter"


class FilmNotFound(RecommendationError):
    status_code = 422
    default_message = "Film not found"


class GenreLookupError(RecommendationError):
    """Raised when a film references a genre missing from the catalog."""

    status_code = 422
    default_message = "Genre lookup failed"


class CatalogUnavailable(RecommendationError):
    status_code = 500
    default_message = "Film catalog is unavailable"


class ReviewProviderError(RecommendationError):
    """Raised when the review provider fails, times out or answers garbage."""

    status_code = 500
    default_message = "Review provider request failed"
