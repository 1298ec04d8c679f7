"""
System API endpoints (health).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from film_recommender.api.dependencies import get_db
from film_recommender.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: catalog database reachable and populated."""
    try:
        film_count = crud.get_film_count(db)
        genre_count = crud.get_genre_count(db)
    except SQLAlchemyError as e:
        logger.error(f"Health check could not query the catalog: {e}", exc_info=True)
        return {"status": "unhealthy", "database": "error"}
    return {
        "status": "healthy",
        "database": "connected",
        "films": film_count,
        "genres": genre_count,
    }
