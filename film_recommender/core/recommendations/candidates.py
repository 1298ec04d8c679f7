"""
Candidate selection against the film catalog.

A candidate shares the source film's genre and was released within
WINDOW_YEARS calendar years of it (inclusive at both ends).
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from film_recommender.core.recommendations.errors import (
    CatalogUnavailable,
    FilmNotFound,
    GenreLookupError,
)
from film_recommender.database import crud
from film_recommender.database.models import Film

logger = logging.getLogger(__name__)

WINDOW_YEARS = 15

SQLITE_MIN_INT = -2 ** 63
SQLITE_MAX_INT = 2 ** 63 - 1


@dataclass(frozen=True)
class CandidateMetadata:
    title: str
    release_date: date


@dataclass
class CandidateSet:
    """Films eligible for recommendation before review filtering."""

    film: Film
    genre_name: str
    start: date
    end: date
    ids: List[int] = field(default_factory=list)
    metadata: Dict[int, CandidateMetadata] = field(default_factory=dict)


def shift_years(value: date, years: int) -> date:
    """
    Shift a date by whole calendar years.

    29 February maps to 28 February when the target year is not a leap year.
    """
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def release_window(release_date: date, years: int = WINDOW_YEARS) -> tuple[date, date]:
    """Return the inclusive (start, end) release window around a date."""
    return shift_years(release_date, -years), shift_years(release_date, years)


def select_candidates(session: Session, film_id: int) -> CandidateSet:
    """
    Look up the source film and its genre-mates inside the release window.

    Args:
        session: Catalog database session
        film_id: Validated source film id

    Returns:
        CandidateSet with ordered candidate ids and their metadata

    Raises:
        FilmNotFound: No film with this id
        GenreLookupError: The film references a missing genre
        CatalogUnavailable: The catalog query failed
    """
    # SQLite integers are signed 64-bit; larger ids cannot be bound to a query
    if not SQLITE_MIN_INT <= film_id <= SQLITE_MAX_INT:
        raise FilmNotFound(f"Film {film_id} not found")

    try:
        film = crud.get_film(session, film_id)
        if film is None:
            raise FilmNotFound(f"Film {film_id} not found")

        genre = crud.get_genre(session, film.genre_id)
        if genre is None:
            raise GenreLookupError(
                f"Genre {film.genre_id} referenced by film {film_id} does not exist"
            )

        start, end = release_window(film.release_date)
        rows = crud.get_films_by_genre_and_date_range(session, genre.id, start, end)
    except SQLAlchemyError as e:
        logger.error(f"Catalog query failed for film {film_id}: {e}", exc_info=True)
        raise CatalogUnavailable(f"Film catalog is unavailable: {e.__class__.__name__}") from e

    candidates = CandidateSet(film=film, genre_name=genre.name, start=start, end=end)
    for row in rows:
        candidates.ids.append(row.id)
        candidates.metadata[row.id] = CandidateMetadata(
            title=row.title,
            release_date=row.release_date,
        )

    logger.debug(
        f"Film {film_id} ({genre.name}): {len(candidates.ids)} candidates "
        f"released {start} .. {end}"
    )
    return candidates
