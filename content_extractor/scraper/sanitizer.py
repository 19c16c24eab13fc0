"""Strip non-content markup from a located region and serialize it.

The sanitizer works in three passes over the region's descendants:

1. remove every subtree matching :data:`NOISE_SELECTORS` (navigation,
   chrome, ads, banners, widgets, scripts, form controls, ...);
2. scrub attributes on what is left: inline styles, event handlers and
   ``target`` are dropped, embedded ``data:`` sources are replaced with a
   placeholder;
3. serialize the region's inner HTML and normalise whitespace to a single
   line.

The region's own tag and attributes are never part of the output, only its
contents.  The caller's tree is mutated in place.
"""

from __future__ import annotations

import re

from bs4 import Tag

NOISE_SELECTORS: tuple[str, ...] = (
    # Page chrome
    "header",
    "footer",
    "nav",
    '[role="navigation"]',
    "aside",
    ".sidebar",
    '[role="complementary"]',
    ".nav",
    ".menu",
    ".header",
    ".footer",
    # Ads, banners and consent prompts
    ".advertisement",
    ".ads",
    ".cookie-notice",
    ".cookie-banner",
    ".consent",
    ".banner",
    # Widgets
    ".social-share",
    ".share-buttons",
    ".related-posts",
    ".comments",
    "#comments",
    # Overlays and notifications
    ".popup",
    ".modal",
    ".overlay",
    ".alert",
    '[role="alert"]',
    ".notification",
    ".subscription",
    ".newsletter",
    ".noprint",
    # Non-rendered and embedded content
    "script",
    "style",
    "noscript",
    "iframe",
    # Interactive controls
    "button",
    "form",
    "input",
    "textarea",
    "select",
)

DROPPED_ATTRIBUTES: tuple[str, ...] = (
    "style",
    "onclick",
    "onload",
    "onerror",
    "onmouseover",
    "onmouseout",
    "onfocus",
    "onblur",
    "target",
)

SOURCE_ATTRIBUTES: tuple[str, ...] = ("src", "data-src")

DATA_URI_PLACEHOLDER = "..."

_LINE_BREAKS = re.compile(r"[\t\r\n]+")
_WHITESPACE_RUNS = re.compile(r"\s{2,}")


def remove_noise(region: Tag) -> int:
    """Delete every descendant subtree of *region* matching :data:`NOISE_SELECTORS`.

    Returns the number of subtrees removed.  Matches nested inside an
    already-removed subtree are skipped.
    """
    removed = 0
    for element in region.select(", ".join(NOISE_SELECTORS)):
        if element.decomposed:
            continue
        element.decompose()
        removed += 1
    return removed


def scrub_attributes(region: Tag) -> None:
    """Drop styling/behaviour attributes and neutralise ``data:`` sources in place."""
    for element in region.find_all(True):
        for attr in DROPPED_ATTRIBUTES:
            if attr in element.attrs:
                del element[attr]
        for attr in SOURCE_ATTRIBUTES:
            value = element.get(attr)
            if isinstance(value, str) and value.strip().lower().startswith("data:"):
                element[attr] = DATA_URI_PLACEHOLDER


def normalize_whitespace(html: str) -> str:
    html = _LINE_BREAKS.sub(" ", html)
    html = _WHITESPACE_RUNS.sub(" ", html)
    return html.strip()


def sanitize(region: Tag) -> str:
    """Clean *region* in place and return its contents as single-line HTML.

    May return an empty string when nothing survives cleaning.
    """
    remove_noise(region)
    scrub_attributes(region)
    return normalize_whitespace(region.decode_contents())
