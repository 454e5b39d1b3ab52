"""Blog Posts API - FastAPI Entry Point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .config import DATABASE_URL
from .infrastructure.database import Database
from .routes import posts_router


def create_app(database: Optional[Database] = None, database_url: Optional[str] = None) -> FastAPI:
    """Build the application.

    Args:
        database: Open handle owned by the caller; the app won't close it
        database_url: Opened on startup and closed on shutdown when no
            handle is given (defaults to DATABASE_URL)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        if database is not None:
            app.state.database = database
            yield
            return

        # Startup: runs before the application starts accepting requests
        app.state.database = await Database.connect(database_url or DATABASE_URL)
        try:
            yield
        finally:
            # Shutdown: close the connection we opened
            await app.state.database.close()

    app = FastAPI(title="Blog Posts", lifespan=lifespan)

    # Include routers
    app.include_router(posts_router)

    return app


app = create_app()
