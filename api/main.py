"""FastAPI application for the golf caddie API."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database.db_manager import GolfDataManager
from database.document_store import JsonFileDocumentStore
from llm.caddie import CaddieClient

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load golf data and set up the caddie on startup, flush on shutdown."""
    manager = GolfDataManager(JsonFileDocumentStore(os.environ.get("GOLF_DATA_DIR")))
    manager.load()
    app.state.db_manager = manager
    app.state.caddie = CaddieClient()
    yield
    manager.save()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Golf Caddie API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import caddie, courses, profile, rounds, stats
    app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
    app.include_router(rounds.router, prefix="/api/courses", tags=["rounds"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])
    app.include_router(profile.router, prefix="/api/profile", tags=["profile"])
    app.include_router(caddie.router, prefix="/api/caddie", tags=["caddie"])

    @app.get("/api/health")
    async def health():
        configured = app.state.caddie.is_configured
        return {"status": "ok" if configured else "degraded", "caddie": configured}

    return app


app = create_app()
