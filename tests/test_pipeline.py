"""Tests for the extraction pipeline.

Most tests inject a fake ``fetcher`` coroutine so no HTTP layer is involved;
the end-to-end tests go through the real fetcher with ``respx`` mocking the
transport.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import respx

from content_extractor.scraper.models import (
    ExtractedContent,
    ExtractionFailure,
    ExtractionWarning,
    FailureKind,
    FetchedPage,
    FetchFailure,
    NonHtmlPage,
)
from content_extractor.scraper.pipeline import (
    EMPTY_AFTER_CLEANING,
    EMPTY_AFTER_CONVERSION,
    clean_html,
    extract_content,
)

_URL = "https://example.com/post"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FetchSpy:
    """Fake fetcher recording every URL it is asked for."""

    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.calls: list[str] = []

    async def __call__(self, url: str):
        self.calls.append(url)
        return self.outcome


def _page(html: str) -> FetchedPage:
    return FetchedPage(url=_URL, status_code=200, content_type="text/html", html=html)


# ---------------------------------------------------------------------------
# clean_html
# ---------------------------------------------------------------------------

class TestCleanHtml:
    def test_empty_input(self) -> None:
        assert clean_html("") == ""

    def test_locates_then_sanitizes(self) -> None:
        html = (
            "<html><body><nav>menu</nav>"
            "<article><p style='x'>Story</p><script>t()</script></article>"
            "<footer>f</footer></body></html>"
        )
        assert clean_html(html) == "<p>Story</p>"

    def test_missing_body_keeps_head_out(self) -> None:
        html = (
            "<!DOCTYPE html><html><head><title>Site Title</title></head>"
            "<p>Real content</p></html>"
        )
        assert clean_html(html) == "<p>Real content</p>"


# ---------------------------------------------------------------------------
# extract_content
# ---------------------------------------------------------------------------

class TestExtractContent:
    async def test_invalid_scheme_never_fetches(self) -> None:
        spy = FetchSpy(_page("<p>unused</p>"))
        for url in (
            "ftp://example.com/file",
            "javascript:alert(1)",
            "mailto:a@b.c",
            "http://example.com:99999/",
        ):
            result = await extract_content(url, fetcher=spy)
            assert isinstance(result, ExtractionFailure)
            assert result.is_error
        assert spy.calls == []

    async def test_fetch_failure_becomes_error(self) -> None:
        spy = FetchSpy(
            FetchFailure(FailureKind.HTTP_STATUS, "Failed to fetch URL. Status: 404", 404)
        )
        result = await extract_content(_URL, fetcher=spy)
        assert isinstance(result, ExtractionFailure)
        assert "404" in result.text
        assert spy.calls == [_URL]

    async def test_timeout_message_is_distinct(self) -> None:
        spy = FetchSpy(FetchFailure(FailureKind.TIMEOUT, "Request timed out after 15 seconds"))
        result = await extract_content(_URL, fetcher=spy)
        assert isinstance(result, ExtractionFailure)
        assert "timed out" in result.text

    async def test_non_html_becomes_warning_with_preview(self) -> None:
        spy = FetchSpy(
            NonHtmlPage(url=_URL, status_code=200, content_type="application/json", preview='{"a": 1}')
        )
        result = await extract_content(_URL, fetcher=spy)
        assert isinstance(result, ExtractionWarning)
        assert not result.is_error
        assert result.preview == '{"a": 1}'
        assert result.text.startswith("Warning: Content type is not HTML (application/json)")
        assert result.text.endswith('{"a": 1}...')

    async def test_empty_after_cleaning_skips_converter(self) -> None:
        spy = FetchSpy(_page("<html><body><nav>menu</nav><script>x()</script></body></html>"))
        converter = MagicMock(return_value="should not be used")
        result = await extract_content(_URL, fetcher=spy, converter=converter)
        assert isinstance(result, ExtractionWarning)
        assert result.message == EMPTY_AFTER_CLEANING
        converter.assert_not_called()

    async def test_empty_after_conversion(self) -> None:
        spy = FetchSpy(_page("<html><body><p>text</p></body></html>"))
        result = await extract_content(_URL, fetcher=spy, converter=lambda html: "  \n ")
        assert isinstance(result, ExtractionWarning)
        assert result.message == EMPTY_AFTER_CONVERSION

    async def test_converter_receives_sanitized_fragment(self) -> None:
        spy = FetchSpy(_page("<html><body><article>\n<p>Hi</p>\n</article></body></html>"))
        converter = MagicMock(return_value="Hi")
        result = await extract_content(_URL, fetcher=spy, converter=converter)
        converter.assert_called_once_with("<p>Hi</p>")
        assert result == ExtractedContent("Hi")

    async def test_fetcher_exception_is_caught(self) -> None:
        async def exploding_fetcher(url: str):
            raise RuntimeError("boom")

        result = await extract_content(_URL, fetcher=exploding_fetcher)
        assert isinstance(result, ExtractionFailure)
        assert result.message == "Processing failed: boom"

    async def test_converter_exception_is_caught(self) -> None:
        spy = FetchSpy(_page("<html><body><p>text</p></body></html>"))

        def broken(html: str) -> str:
            raise ValueError("bad markup")

        result = await extract_content(_URL, fetcher=spy, converter=broken)
        assert isinstance(result, ExtractionFailure)
        assert "bad markup" in result.text


# ---------------------------------------------------------------------------
# End-to-end through the real fetcher and converter
# ---------------------------------------------------------------------------

class TestEndToEnd:
    async def test_article_to_markdown(self) -> None:
        html = "<html><body><article><p>Hello <b>World</b></p></article></body></html>"
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, html=html))
            result = await extract_content(_URL)

        assert isinstance(result, ExtractedContent)
        assert not result.is_error
        assert result.text == "Hello **World**"

    async def test_boilerplate_is_dropped(self) -> None:
        html = """\
<!DOCTYPE html>
<html>
<head><title>Post</title><style>body{}</style></head>
<body>
  <header><a href="/">Blog</a></header>
  <nav><ul><li>Home</li><li>About</li></ul></nav>
  <main>
    <h1>Release notes</h1>
    <p>Version <em>2.0</em> is out.</p>
    <div class="share-buttons"><button>Share</button></div>
  </main>
  <footer>Copyright</footer>
</body>
</html>
"""
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, html=html))
            result = await extract_content(_URL)

        assert isinstance(result, ExtractedContent)
        assert result.markdown.startswith("# Release notes")
        assert "Version *2.0* is out." in result.markdown
        for noise in ("Blog", "About", "Share", "Copyright"):
            assert noise not in result.markdown

    async def test_page_without_body_tag_omits_head(self) -> None:
        html = (
            "<!DOCTYPE html><html><head><title>Site Title</title>"
            '<meta charset="utf-8"></head><p>Real content</p></html>'
        )
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, html=html))
            result = await extract_content(_URL)

        assert isinstance(result, ExtractedContent)
        assert result.markdown == "Real content"

    async def test_not_found(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(404, text="nope"))
            result = await extract_content(_URL)

        assert isinstance(result, ExtractionFailure)
        assert result.text == "Error: Failed to fetch URL. Status: 404"

    async def test_json_preview_is_bounded(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, json={"k": "v" * 5000}))
            result = await extract_content(_URL)

        assert isinstance(result, ExtractionWarning)
        assert not result.is_error
        assert len(result.preview) <= 500
        assert result.text.endswith(result.preview + "...")

    async def test_network_error(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError("name resolution failed"))
            result = await extract_content(_URL)

        assert isinstance(result, ExtractionFailure)
        assert "name resolution failed" in result.text
