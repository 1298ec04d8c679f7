"""
Result assembly: merge scores with catalog metadata, sort and paginate.
"""

from typing import Any, Dict, Iterable

from film_recommender.core.recommendations.candidates import CandidateSet
from film_recommender.core.recommendations.scoring import ScoredFilm


def assemble_response(
    scored: Iterable[ScoredFilm],
    candidates: CandidateSet,
    limit: int,
    offset: int
) -> Dict[str, Any]:
    """
    Build the recommendation response payload.

    Scored films missing from the candidate metadata are ignored. Items are
    sorted by film id, then the first `offset` are dropped and at most `limit`
    are kept.

    Args:
        scored: Qualifying films from the scorer
        candidates: Candidate set with metadata and genre name
        limit: Maximum number of items to return
        offset: Number of leading items to skip

    Returns:
        Dictionary with `recommendations` (list of item dicts) and `meta`
    """
    assert limit >= 0 and offset >= 0, "pagination must be validated first"

    items = []
    for film in sorted(scored, key=lambda s: s.film_id):
        metadata = candidates.metadata.get(film.film_id)
        if metadata is None:
            continue
        assert candidates.start <= metadata.release_date <= candidates.end
        items.append({
            "id": film.film_id,
            "title": metadata.title,
            "release_date": metadata.release_date,
            "genre": candidates.genre_name,
            "average_rating": film.average_rating,
            "review_count": film.review_count,
        })

    return {
        "recommendations": items[offset:offset + limit],
        "meta": {"limit": limit, "offset": offset},
    }
