"""
FastAPI application entry point for the ScreenScout API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.config import get_api_host, get_api_port, get_database_path, get_log_level
from app.api.routers import users, favorites, catalog, recommendations, system
from app.database.connection import get_db_manager
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(level=get_log_level())
    get_db_manager(db_path=get_database_path()).create_tables()
    logger.info("ScreenScout API started")
    yield
    logger.info("ScreenScout API stopped")


app = FastAPI(
    title="ScreenScout API",
    description="Movie and TV discovery with favorites and description-based recommendations",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(users.auth_router)
app.include_router(favorites.router)
app.include_router(catalog.router)
app.include_router(recommendations.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "ScreenScout API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.api.main:app", host=get_api_host(), port=get_api_port())
