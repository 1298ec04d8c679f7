"""
Database module for the film catalog.

This module provides database models, connection management, and CRUD operations
for the SQLite catalog database using SQLAlchemy ORM.
"""

from film_recommender.database.models import Base, Genre, Film
from film_recommender.database.connection import DatabaseManager, get_db_manager
from film_recommender.database.init_db import init_database, verify_schema
from film_recommender.database import crud

__all__ = [
    # Models
    'Base',
    'Genre',
    'Film',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
