"""HTML fragment → Markdown conversion."""

from __future__ import annotations

from markdownify import ATX, markdownify


def html_to_markdown(fragment: str) -> str:
    """Convert a sanitized HTML *fragment* to Markdown, trimmed of outer whitespace."""
    if not fragment:
        return ""
    return markdownify(fragment, heading_style=ATX, strong_em_symbol="*").strip()
