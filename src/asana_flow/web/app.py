"""FastAPI application exposing the personalization engine as JSON."""

from pathlib import Path

from fastapi import FastAPI, Request

from .. import __version__
from ..data.catalog_loader import load_catalog
from .routers import bodymap, recommendations, recovery, sequences


def create_app(catalog_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The catalog is loaded once and shared read-only by every request.
    """
    app = FastAPI(
        title="asana-flow",
        description="Practice personalization engine for yoga sequencing",
        version=__version__,
    )

    app.state.catalog = load_catalog(catalog_path)

    app.include_router(recommendations.router)
    app.include_router(bodymap.router)
    app.include_router(recovery.router)
    app.include_router(sequences.router)

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "poses": len(request.app.state.catalog),
        }

    return app
