"""Data models for the extraction pipeline.

Every object here is request-scoped: it is created while handling one URL
and discarded once the result has been returned to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union
from urllib.parse import urlparse

ALLOWED_SCHEMES = ("http", "https")


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

@dataclass
class ExtractionRequest:
    """A single ``extract-content`` call."""

    url: str

    def validate(self) -> FetchFailure | None:
        """Return ``None`` if :attr:`url` is fetchable, else an ``INVALID_URL`` failure.

        Only absolute ``http``/``https`` URLs with a host are accepted.
        """
        try:
            parsed = urlparse(self.url)
            parsed.port  # range/format is only checked on access
        except ValueError as exc:
            return FetchFailure(FailureKind.INVALID_URL, f"Invalid URL {self.url!r}: {exc}")
        if parsed.scheme.lower() not in ALLOWED_SCHEMES:
            return FetchFailure(
                FailureKind.INVALID_URL,
                f"Unsupported URL scheme {parsed.scheme or '(none)'!r}; "
                "only http and https are allowed",
            )
        if not parsed.netloc:
            return FetchFailure(FailureKind.INVALID_URL, f"Invalid URL {self.url!r}: missing host")
        return None


# ---------------------------------------------------------------------------
# Fetch outcomes
# ---------------------------------------------------------------------------

class FailureKind(str, Enum):
    INVALID_URL = "invalid_url"
    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP_STATUS = "http_status"


@dataclass
class FetchedPage:
    """A 2xx response declaring an HTML content type."""

    url: str
    status_code: int
    content_type: str
    html: str


@dataclass
class NonHtmlPage:
    """A 2xx response whose content type is missing or not HTML.

    Only a truncated preview of the body is kept; it is never parsed.
    """

    url: str
    status_code: int
    content_type: str | None
    preview: str


@dataclass
class FetchFailure:
    kind: FailureKind
    message: str
    status_code: int | None = None


FetchOutcome = Union[FetchedPage, NonHtmlPage, FetchFailure]


# ---------------------------------------------------------------------------
# Extraction results
# ---------------------------------------------------------------------------

@dataclass
class ExtractedContent:
    """Clean Markdown extracted from the page's primary content region."""

    markdown: str

    kind = "success"
    is_error = False

    @property
    def text(self) -> str:
        return self.markdown


@dataclass
class ExtractionWarning:
    """A degraded but non-error outcome (non-HTML body, nothing left to convert)."""

    message: str
    preview: str | None = None

    kind = "warning"
    is_error = False

    @property
    def text(self) -> str:
        return f"Warning: {self.message}"


@dataclass
class ExtractionFailure:
    message: str

    kind = "error"
    is_error = True

    @property
    def text(self) -> str:
        return f"Error: {self.message}"


ExtractionResult = Union[ExtractedContent, ExtractionWarning, ExtractionFailure]


def to_tool_payload(result: ExtractionResult) -> dict[str, Any]:
    """Shape *result* as a tool-call response: one text block plus ``isError``."""
    payload: dict[str, Any] = {"content": [{"type": "text", "text": result.text}]}
    if result.is_error:
        payload["isError"] = True
    return payload
