"""
CRUD operations for the Genre and Film catalog models.

Read operations back the recommendation pipeline; create operations are used
by the catalog import tooling and by tests.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from film_recommender.database.models import Genre, Film


# ==================== GENRE CRUD OPERATIONS ====================

def create_genre(session: Session, genre_id: int, name: str) -> Genre:
    """
    Create a new genre.

    Args:
        session: Database session
        genre_id: Genre ID
        name: Genre name

    Returns:
        Created Genre object
    """
    genre = Genre(id=genre_id, name=name)
    session.add(genre)
    session.commit()
    session.refresh(genre)
    return genre


def get_genre(session: Session, genre_id: int) -> Optional[Genre]:
    """
    Get a genre by ID.

    Args:
        session: Database session
        genre_id: Genre ID

    Returns:
        Genre object or None if not found
    """
    return session.query(Genre).filter(Genre.id == genre_id).first()


def get_genre_count(session: Session) -> int:
    """Get total count of genres."""
    return session.query(func.count(Genre.id)).scalar()


# ==================== FILM CRUD OPERATIONS ====================

def create_film(
    session: Session,
    film_id: int,
    title: str,
    release_date: date,
    genre_id: int,
    **extra
) -> Film:
    """
    Create a new film.

    Args:
        session: Database session
        film_id: Film ID
        title: Film title
        release_date: Release date
        genre_id: ID of an existing genre
        **extra: Optional descriptive columns (tagline, revenue, budget,
            runtime, original_language, status)

    Returns:
        Created Film object

    Raises:
        ValueError: If an unknown column is passed in extra
    """
    unknown = [key for key in extra if not hasattr(Film, key)]
    if unknown:
        raise ValueError(f"Unknown film fields: {', '.join(sorted(unknown))}")

    film = Film(
        id=film_id,
        title=title,
        release_date=release_date,
        genre_id=genre_id,
        **extra
    )
    session.add(film)
    session.commit()
    session.refresh(film)
    return film


def get_film(session: Session, film_id: int) -> Optional[Film]:
    """
    Get a film by ID.

    Args:
        session: Database session
        film_id: Film ID

    Returns:
        Film object or None if not found
    """
    return session.query(Film).filter(Film.id == film_id).first()


def get_film_count(session: Session) -> int:
    """Get total count of films."""
    return session.query(func.count(Film.id)).scalar()


def get_films_by_genre_and_date_range(
    session: Session,
    genre_id: int,
    start: date,
    end: date
) -> List[Row]:
    """
    Get films of a genre released within an inclusive date range.

    Only id, title and release_date are selected; full rows are not loaded.

    Args:
        session: Database session
        genre_id: Genre ID
        start: Earliest release date (inclusive)
        end: Latest release date (inclusive)

    Returns:
        List of (id, title, release_date) rows ordered by id
    """
    return session.query(Film.id, Film.title, Film.release_date).filter(
        Film.genre_id == genre_id,
        Film.release_date.between(start, end)
    ).order_by(Film.id).all()
