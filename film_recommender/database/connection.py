"""
Catalog database connection management.

One DatabaseManager per process owns the SQLite engine; request handlers
borrow sessions from it through session_scope().
"""

import os
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from film_recommender.database.models import Base


DEFAULT_DB_PATH = "db/database.db"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Build the SQLite URL for a catalog file, creating its directory.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy database URL
    """
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def enable_foreign_keys(dbapi_conn, connection_record):
    """Turn on SQLite foreign key enforcement for every new connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Owns the catalog engine and hands out transactional sessions.

    Usage:
        db_manager = DatabaseManager("db/database.db")
        with db_manager.session_scope() as session:
            film = crud.get_film(session, 7)
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Args:
            db_path: Path to SQLite database file
            echo: If True, log all SQL statements
        """
        self.db_path = db_path
        # StaticPool shares one connection across the threadpool workers
        self.engine = create_engine(
            get_database_url(db_path),
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
        self.SessionLocal = sessionmaker(autoflush=False, bind=self.engine)

    def create_tables(self):
        """Create the catalog tables that don't exist yet."""
        Base.metadata.create_all(bind=self.engine)

    def reset_database(self):
        """Drop and recreate the catalog tables. Deletes all data."""
        Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Yield a session, committing on success and rolling back on failure.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


_db_manager: DatabaseManager | None = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Get or create the process-wide DatabaseManager.

    The db_path of the first call wins; later calls return the same manager.
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
    return _db_manager
