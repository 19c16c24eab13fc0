"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from content_extractor.api import app

    uvicorn content_extractor.api:app --reload
"""

from content_extractor.api.app import app

__all__ = ["app"]
