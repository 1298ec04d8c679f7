"""
FastAPI application entry point for the Film Recommendations API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from film_recommender import __version__
from film_recommender.api.config import get_api_host, get_api_port, get_log_level
from film_recommender.api.routers import films, system
from film_recommender.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(level=get_log_level())
    logger.info(f"Film Recommendations API {__version__} starting")
    yield


app = FastAPI(
    title="Film Recommendations API",
    description="Same-genre, same-era film recommendations filtered by review quality",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(films.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Film Recommendations API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run():
    """Serve the app with uvicorn on API_HOST:API_PORT."""
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
