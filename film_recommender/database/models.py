"""
SQLAlchemy ORM models for the film catalog database.

This module defines the Genre and Film tables. The catalog is read-only from
the recommendation pipeline's point of view; rows are written only by the
import tooling.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy import Integer, String, Text, Date, ForeignKey, Index
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Genre(Base):
    """
    Genre table.

    Attributes:
        id: Primary key
        name: Genre name (e.g. 'Drama')
    """
    __tablename__ = 'genres'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    films: Mapped[List["Film"]] = relationship("Film", back_populates="genre")

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"


class Film(Base):
    """
    Film table storing catalog metadata.

    Attributes:
        id: Primary key
        title: Film title (required)
        release_date: Calendar release date (required)
        genre_id: Foreign key to genres table
        tagline: Marketing tagline (optional)
        revenue: Box office revenue (optional)
        budget: Production budget (optional)
        runtime: Runtime in minutes (optional)
        original_language: ISO language code (optional)
        status: Release status, e.g. 'Released' (optional)
    """
    __tablename__ = 'films'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('genres.id'),
        nullable=False
    )
    tagline: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    revenue: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    budget: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    runtime: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    original_language: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Relationships
    genre: Mapped["Genre"] = relationship("Genre", back_populates="films")

    # Indexes for the recommendation range query
    __table_args__ = (
        Index('idx_films_genre', 'genre_id'),
        Index('idx_films_release_date', 'release_date'),
    )

    def __repr__(self) -> str:
        return f"<Film(id={self.id}, title='{self.title}', release_date={self.release_date})>"
