"""FastAPI app factory for the caseintel API."""

from fastapi import FastAPI

from caseintel import __version__
from caseintel.api.reports import router as reports_router
from caseintel.api.taxonomy import router as taxonomy_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(title="caseintel Case Study Intelligence API", version=__version__)
    app.include_router(taxonomy_router)
    app.include_router(reports_router)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


# For uvicorn, expose `app` at module level
app = create_app()
