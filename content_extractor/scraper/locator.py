"""Locate the primary content region of a parsed HTML document."""

from __future__ import annotations

from typing import Sequence

from bs4 import BeautifulSoup, Doctype, Tag

# Most specific first.  A selector only wins if it matches exactly one
# element; zero or several matches are no signal and the scan moves on.
CONTENT_SELECTORS: tuple[str, ...] = (
    '[role="article"]',
    "article",
    '[role="main"]',
    "main",
    "#content",
    "#main-content",
    ".article",
    ".post",
    ".content",
    ".main",
)


def _implicit_body(tree: BeautifulSoup) -> Tag:
    """Stand-in for ``<body>`` when the markup omits it.

    ``html.parser`` does not synthesize a body, so the doctype and ``<head>``
    are dropped and whatever remains under ``<html>`` (or the document) is
    the region.
    """
    for node in list(tree.contents):
        if isinstance(node, Doctype):
            node.extract()
    if tree.head is not None:
        tree.head.decompose()
    return tree.html or tree


def locate(tree: BeautifulSoup, selectors: Sequence[str] = CONTENT_SELECTORS) -> Tag:
    """Return the element most likely to hold the page's main content.

    Falls back to ``<body>``, or to the document minus its doctype and
    ``<head>`` when the markup has no body at all.  Never returns ``None``.
    """
    for selector in selectors:
        matches = tree.select(selector, limit=2)
        if len(matches) == 1:
            return matches[0]
    if tree.body is not None:
        return tree.body
    return _implicit_body(tree)
