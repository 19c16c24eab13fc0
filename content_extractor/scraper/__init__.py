"""Scraper package — fetch, locate, sanitize and convert web content."""

from content_extractor.scraper.fetcher import fetch_page
from content_extractor.scraper.locator import CONTENT_SELECTORS, locate
from content_extractor.scraper.models import (
    ExtractedContent,
    ExtractionFailure,
    ExtractionResult,
    ExtractionWarning,
    to_tool_payload,
)
from content_extractor.scraper.pipeline import clean_html, extract_content
from content_extractor.scraper.sanitizer import NOISE_SELECTORS, sanitize

__all__ = [
    "fetch_page",
    "locate",
    "sanitize",
    "clean_html",
    "extract_content",
    "to_tool_payload",
    "CONTENT_SELECTORS",
    "NOISE_SELECTORS",
    "ExtractedContent",
    "ExtractionWarning",
    "ExtractionFailure",
    "ExtractionResult",
]
