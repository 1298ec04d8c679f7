"""
Database initialization and schema verification.
"""

import logging

from film_recommender.database.connection import DatabaseManager, DEFAULT_DB_PATH, get_db_manager

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'genres', 'films'}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        logger.info("Creating database tables...")
        db_manager.create_tables()

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all catalog tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    from sqlalchemy import inspect

    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    missing_tables = EXPECTED_TABLES - existing_tables
    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False

    logger.info(f"All tables exist: {existing_tables}")
    return True
