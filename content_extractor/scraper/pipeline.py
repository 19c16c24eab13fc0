"""Extraction pipeline: turns a URL into an :data:`ExtractionResult`.

Stages run strictly in order and each either hands a value to the next or
produces the terminal result:

    fetch → classify → parse → locate → sanitize → convert

Only the fetch suspends; everything after it is synchronous.  Every failure
mode is reported as a result object, so :func:`extract_content` never
raises.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from bs4 import BeautifulSoup
from loguru import logger

from content_extractor.scraper.converter import html_to_markdown
from content_extractor.scraper.fetcher import fetch_page
from content_extractor.scraper.locator import locate
from content_extractor.scraper.models import (
    ExtractedContent,
    ExtractionFailure,
    ExtractionRequest,
    ExtractionResult,
    ExtractionWarning,
    FetchedPage,
    FetchFailure,
    FetchOutcome,
    NonHtmlPage,
)
from content_extractor.scraper.sanitizer import sanitize

Fetcher = Callable[[str], Awaitable[FetchOutcome]]
Converter = Callable[[str], str]

EMPTY_AFTER_CLEANING = "Content empty after cleaning"
EMPTY_AFTER_CONVERSION = "Content empty after conversion"


def _kb(text: str) -> int:
    return round(len(text) / 1024)


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def classify(outcome: FetchOutcome) -> FetchedPage | ExtractionResult:
    """Pass HTML pages through; turn every other fetch outcome into a result."""
    if isinstance(outcome, FetchFailure):
        return ExtractionFailure(outcome.message)
    if isinstance(outcome, NonHtmlPage):
        return ExtractionWarning(
            f"Content type is not HTML ({outcome.content_type}). "
            f"Raw text:\n{outcome.preview}...",
            preview=outcome.preview,
        )
    return outcome


def clean_html(html: str) -> str:
    """Parse *html*, locate its main content and return it sanitized.

    Returns an empty string for empty input or when nothing survives.
    """
    if not html:
        return ""
    tree = BeautifulSoup(html, "html.parser")
    region = locate(tree)
    return sanitize(region)


def convert(cleaned: str, converter: Converter) -> ExtractionResult:
    if not cleaned.strip():
        return ExtractionWarning(EMPTY_AFTER_CLEANING)
    markdown = converter(cleaned)
    if not markdown or not markdown.strip():
        return ExtractionWarning(EMPTY_AFTER_CONVERSION)
    return ExtractedContent(markdown)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def extract_content(
    url: str,
    *,
    fetcher: Fetcher = fetch_page,
    converter: Converter = html_to_markdown,
) -> ExtractionResult:
    """Fetch *url* and return its primary content as Markdown.

    Args:
        url: Absolute ``http``/``https`` URL.  Anything else is rejected
            before *fetcher* is called.
        fetcher: Coroutine performing the network fetch.
        converter: HTML fragment → Markdown function.

    Returns:
        :class:`ExtractedContent` on success, :class:`ExtractionWarning` for
        non-HTML or empty content, :class:`ExtractionFailure` otherwise.
    """
    try:
        invalid = ExtractionRequest(url).validate()
        if invalid is not None:
            logger.warning(f"Rejected URL {url!r}: {invalid.message}")
            return ExtractionFailure(invalid.message)

        page = classify(await fetcher(url))
        if not isinstance(page, FetchedPage):
            return page

        logger.info(f"Cleaning HTML for: {url}")
        cleaned = clean_html(page.html)
        logger.info(f"HTML cleaned ({_kb(cleaned)} KB) for: {url}")

        logger.info(f"Converting cleaned HTML to Markdown for: {url}")
        result = convert(cleaned, converter)
        if isinstance(result, ExtractedContent):
            logger.info(f"Converted to Markdown ({_kb(result.markdown)} KB) for: {url}")
        else:
            logger.warning(f"{result.message} for: {url}")
        return result
    except Exception as exc:
        logger.exception(f"Error processing URL {url}")
        return ExtractionFailure(f"Processing failed: {exc}")
