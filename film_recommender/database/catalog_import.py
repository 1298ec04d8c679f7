"""
Bulk import of genres and films into the catalog database.

Input is a decoded JSON document:

    {
        "genres": [{"id": 1, "name": "Drama"}, ...],
        "films": [{"id": 7, "title": "...", "release_date": "1994-09-23",
                   "genre_id": 1, "tagline": "...", ...}, ...]
    }

Rows whose id already exists are skipped.
"""

import logging
from datetime import date
from typing import Any, Dict, Tuple

from sqlalchemy.orm import Session

from film_recommender.database.models import Film, Genre

logger = logging.getLogger(__name__)

FILM_EXTRA_FIELDS = ('tagline', 'revenue', 'budget', 'runtime', 'original_language', 'status')


def _parse_release_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def import_catalog(session: Session, data: Dict[str, Any]) -> Tuple[int, int]:
    """
    Insert genres and films from a catalog document.

    Args:
        session: Database session
        data: Catalog document with `genres` and `films` lists

    Returns:
        Tuple of (genres imported, films imported)

    Raises:
        ValueError: If a record is missing a required field or has a bad date
    """
    existing_genres = {genre_id for (genre_id,) in session.query(Genre.id)}
    existing_films = {film_id for (film_id,) in session.query(Film.id)}

    genre_count = 0
    for record in data.get('genres', []):
        try:
            genre_id = int(record['id'])
            name = record['name']
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid genre record {record!r}") from e
        if genre_id in existing_genres:
            continue
        session.add(Genre(id=genre_id, name=name))
        existing_genres.add(genre_id)
        genre_count += 1

    film_count = 0
    skipped = 0
    for record in data.get('films', []):
        try:
            film_id = int(record['id'])
            film = Film(
                id=film_id,
                title=record['title'],
                release_date=_parse_release_date(record['release_date']),
                genre_id=int(record['genre_id']),
                **{key: record[key] for key in FILM_EXTRA_FIELDS if key in record}
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid film record {record!r}") from e
        if film_id in existing_films:
            skipped += 1
            continue
        session.add(film)
        existing_films.add(film_id)
        film_count += 1

    session.commit()
    logger.info(f"Imported {genre_count} genres and {film_count} films ({skipped} films already present)")
    return genre_count, film_count
