"""HTTP fetcher: one bounded GET per URL, classified into a :data:`FetchOutcome`."""

from __future__ import annotations

import asyncio

import httpx
from loguru import logger

from content_extractor.config import settings
from content_extractor.scraper.models import (
    ExtractionRequest,
    FailureKind,
    FetchedPage,
    FetchFailure,
    FetchOutcome,
    NonHtmlPage,
)

_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def is_html_content_type(content_type: str | None) -> bool:
    """Return ``True`` if the declared *content_type* header names an HTML document."""
    if not content_type:
        return False
    lowered = content_type.lower()
    return any(ct in lowered for ct in _HTML_CONTENT_TYPES)


async def fetch_page(
    url: str,
    *,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchOutcome:
    """Fetch *url* once and classify the response.

    The whole request (connect, headers and body) must complete within
    *timeout* seconds (``settings.request_timeout`` by default); otherwise
    the in-flight request is cancelled and a ``TIMEOUT`` failure returned.
    Invalid URLs are rejected before any client is created.

    Args:
        url: Absolute ``http``/``https`` URL.
        timeout: Overall bound in seconds.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``.

    Returns:
        :class:`FetchedPage`, :class:`NonHtmlPage` or :class:`FetchFailure`.
        Never raises for network-level problems.
    """
    invalid = ExtractionRequest(url).validate()
    if invalid is not None:
        return invalid

    bound = settings.request_timeout if timeout is None else timeout
    logger.info(f"Fetching content from: {url}")

    try:
        async with httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            timeout=bound,
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await asyncio.wait_for(client.get(url), timeout=bound)
    except (asyncio.TimeoutError, httpx.TimeoutException):
        logger.warning(f"Request timed out after {bound:g}s for {url}")
        return FetchFailure(FailureKind.TIMEOUT, f"Request timed out after {bound:g} seconds")
    except httpx.HTTPError as exc:
        logger.error(f"Network error fetching {url}: {exc}")
        return FetchFailure(FailureKind.NETWORK, f"Failed to fetch URL: {exc}")

    if not response.is_success:
        logger.error(f"HTTP error! status: {response.status_code} for {url}")
        return FetchFailure(
            FailureKind.HTTP_STATUS,
            f"Failed to fetch URL. Status: {response.status_code}",
            status_code=response.status_code,
        )

    content_type = response.headers.get("content-type")
    if not is_html_content_type(content_type):
        logger.warning(f"Non-HTML content type received: {content_type} for {url}")
        return NonHtmlPage(
            url=url,
            status_code=response.status_code,
            content_type=content_type,
            preview=response.text[: settings.preview_chars],
        )

    html = response.text
    logger.info(f"Successfully fetched HTML ({round(len(html) / 1024)} KB) from: {url}")
    return FetchedPage(
        url=url,
        status_code=response.status_code,
        content_type=content_type or "",
        html=html,
    )
