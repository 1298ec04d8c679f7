"""
Request parameter parsing for the recommendations endpoint.
"""

import re
from dataclasses import dataclass
from typing import Optional, Type

from film_recommender.core.recommendations.errors import (
    InvalidLimit,
    InvalidMovieId,
    InvalidOffset,
    ValidationError,
)

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


@dataclass(frozen=True)
class ValidatedRequest:
    """Parsed recommendation request."""

    film_id: int
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


def _parse_int(raw: str, error: Type[ValidationError], name: str) -> int:
    if not _INTEGER_RE.match(raw):
        raise error(f"Invalid {name}: {raw!r} is not an integer")
    return int(raw)


def _parse_page_param(
    raw: Optional[str],
    default: int,
    error: Type[ValidationError],
    name: str
) -> int:
    # Negative values are ignored rather than rejected
    if raw is None or raw.strip() == "":
        return default
    value = _parse_int(raw, error, name)
    return value if value >= 0 else default


def validate_request(
    raw_id: str,
    raw_limit: Optional[str] = None,
    raw_offset: Optional[str] = None
) -> ValidatedRequest:
    """
    Parse and bounds-check the film id and pagination parameters.

    Args:
        raw_id: Film id path parameter
        raw_limit: Raw `limit` query parameter, or None when absent
        raw_offset: Raw `offset` query parameter, or None when absent

    Returns:
        ValidatedRequest with defaults applied

    Raises:
        InvalidMovieId: If raw_id is not an integer
        InvalidLimit: If limit is present but not an integer
        InvalidOffset: If offset is present but not an integer
    """
    if raw_id is None:
        raise InvalidMovieId("Invalid movie id: missing")
    film_id = _parse_int(str(raw_id), InvalidMovieId, "movie id")
    limit = _parse_page_param(raw_limit, DEFAULT_LIMIT, InvalidLimit, "limit")
    offset = _parse_page_param(raw_offset, DEFAULT_OFFSET, InvalidOffset, "offset")
    return ValidatedRequest(film_id=film_id, limit=limit, offset=offset)
