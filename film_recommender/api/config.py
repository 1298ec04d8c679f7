"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

DEFAULT_REVIEWS_API_URL = (
    "http://credentials-api.generalassemb.ly/4576f55f-c427-4cfc-a11c-5bfe914ca6c1"
)


def get_database_path() -> str:
    """Get database file path from env (DB_PATH or DATABASE_URL) or default."""
    db_path = os.getenv("DB_PATH", "") or os.getenv("DATABASE_URL", "").replace("sqlite:///", "")
    return db_path or str(Path(__file__).resolve().parents[2] / "db" / "database.db")


def get_reviews_api_url() -> str:
    """Get review provider endpoint."""
    return os.getenv("REVIEWS_API_URL", "") or DEFAULT_REVIEWS_API_URL


def get_reviews_api_timeout() -> float:
    """Get review provider timeout in seconds."""
    return float(os.getenv("REVIEWS_API_TIMEOUT", "10"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "3000"))
