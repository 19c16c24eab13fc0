"""Extraction endpoint.

Routes
------
POST /extract    Body: {"url": "https://..."}    → extract_content

Pipeline outcomes are always returned with status 200; ``is_error`` and
``kind`` tell failures and warnings apart.  Only malformed bodies (including
non-http(s) URLs) are rejected, with 422.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, HttpUrl

from content_extractor.scraper.pipeline import extract_content

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ExtractRequest(BaseModel):
    url: HttpUrl


class ExtractResponse(BaseModel):
    text: str
    is_error: bool
    kind: Literal["success", "warning", "error"]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=ExtractResponse)
async def extract_endpoint(body: ExtractRequest) -> ExtractResponse:
    """Fetch the URL and return its main content as Markdown."""
    result = await extract_content(str(body.url))
    return ExtractResponse(text=result.text, is_error=result.is_error, kind=result.kind)
