#!/usr/bin/env python
"""
Catalog database initialization script.

Creates the schema and optionally imports genres and films from a JSON file.

Usage:
    # Create tables only
    python scripts/init_database.py

    # Drop everything and import a catalog
    python scripts/init_database.py --reset --catalog data/catalog.json
"""

import sys
import json
import argparse
import logging
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from film_recommender.database import init_database, verify_schema, crud
from film_recommender.database.catalog_import import import_catalog
from film_recommender.api.config import get_database_path
from film_recommender.utils.logging_config import setup_logging

logger = logging.getLogger("init_database")


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(description="Initialize the film catalog database")
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=get_database_path(),
        help='Path to SQLite database file (default: DB_PATH or db/database.db)'
    )
    parser.add_argument(
        '--catalog',
        type=str,
        help='JSON file with "genres" and "films" lists to import'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log warnings and errors'
    )
    args = parser.parse_args()

    setup_logging(level="WARNING" if args.quiet else "INFO")

    try:
        db_manager = init_database(db_path=args.db_path, reset=args.reset)
        if not verify_schema(db_manager):
            sys.exit(1)

        if args.catalog:
            catalog_path = Path(args.catalog)
            with open(catalog_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            with db_manager.session_scope() as session:
                import_catalog(session, data)

        with db_manager.session_scope() as session:
            logger.info(
                f"Catalog contains {crud.get_genre_count(session)} genres and "
                f"{crud.get_film_count(session)} films"
            )
    except (OSError, ValueError, SQLAlchemyError) as e:
        logger.error(f"Initialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
