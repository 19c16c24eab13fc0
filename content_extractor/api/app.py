"""FastAPI application factory.

Routers
-------
    /extract   — run the extraction pipeline for one URL
    /health    — liveness probe

The app holds no state: every request runs its own fetch and parse.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_extractor import __version__
from content_extractor.api.routers import extract as extract_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Content Extractor API",
        description=(
            "REST interface to the content extractor: fetch a web page, strip "
            "boilerplate markup and return the main content as Markdown."
        ),
        version=__version__,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(extract_router.router, prefix="/extract", tags=["extract"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn content_extractor.api.app:app --reload
app = create_app()
