"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books
from db import init_db, make_engine, make_session_factory
from settings import settings

logger = logging.getLogger(__name__)


def create_app(db_path: Optional[str] = None) -> FastAPI:
    """Build the FastAPI app with its own engine and session factory."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title="Books API",
        description="Minimal REST API for managing a list of books",
        version="v1",
        docs_url="/swagger",
    )

    engine = make_engine(db_path or settings.BOOKS_DB_PATH)
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.include_router(books.router, prefix="/books", tags=["books"])

    @app.on_event("startup")
    def startup_event():
        """Initialize database schema on startup."""
        version = init_db(engine)
        logger.info("Database ready at %s (schema v%s)", engine.url.database, version)

    @app.on_event("shutdown")
    def shutdown_event():
        engine.dispose()

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Books API"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
