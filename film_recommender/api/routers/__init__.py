"""
API route handlers.
"""

from film_recommender.api.routers import films, system

__all__ = ["films", "system"]
