"""MCP server exposing the ``extract-content`` tool over stdio.

Run with::

    python -m content_extractor.mcp_server

or through the CLI (``python cli/main.py serve-mcp``).  Logs go to stderr so
they never interleave with protocol frames on stdout.
"""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from content_extractor import __version__
from content_extractor.logging_setup import configure_logging
from content_extractor.scraper.pipeline import extract_content

SERVER_NAME = "ContentExtractor"
TOOL_NAME = "extract-content"

server = Server(SERVER_NAME, version=__version__)

EXTRACT_CONTENT_TOOL = Tool(
    name=TOOL_NAME,
    description=(
        "Fetch a web page and return its main content as Markdown, with "
        "navigation, ads, scripts and other boilerplate removed."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "format": "uri",
                "description": "Absolute http(s) URL of the page to extract",
            },
        },
        "required": ["url"],
    },
)


class ToolCallError(Exception):
    """Raised for calls the MCP server reports back with ``isError=true``."""


@server.list_tools()
async def handle_list_tools() -> list[Tool]:
    return [EXTRACT_CONTENT_TOOL]


@server.call_tool()
async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Run the extraction pipeline for an ``extract-content`` call.

    Failure results are raised as :class:`ToolCallError`; the MCP server
    turns the exception message into an error result.  Warnings are plain
    text results.
    """
    if name != TOOL_NAME:
        raise ToolCallError(f"Unknown tool: {name}")
    url = (arguments or {}).get("url")
    if not isinstance(url, str) or not url.strip():
        raise ToolCallError("Missing required string argument 'url'")

    result = await extract_content(url.strip())
    if result.is_error:
        raise ToolCallError(result.text)
    return [TextContent(type="text", text=result.text)]


async def serve() -> None:
    """Serve until the client closes stdin."""
    logger.info("MCP Server starting with stdio transport...")
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server connected and listening on stdio.")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    configure_logging()
    asyncio.run(serve())


if __name__ == "__main__":
    main()
