"""Content extractor CLI — entry-point for local runs and the servers.

Usage:
    python cli/main.py --help

Commands:
    extract     → run the pipeline once and print the result
    serve-mcp   → serve the ``extract-content`` tool over MCP stdio
    serve-api   → serve the REST API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from content_extractor.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Optional

import typer

from content_extractor.config import settings
from content_extractor.logging_setup import configure_logging

app = typer.Typer(
    name="content-extractor",
    help="Fetch web pages and extract their main content as Markdown.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: EXTRACTOR_LOG_LEVEL or INFO)."
    ),
) -> None:
    configure_logging(log_level)


# ---------------------------------------------------------------------------
# One-shot extraction
# ---------------------------------------------------------------------------
@app.command("extract")
def extract(
    url: str = typer.Option(..., help="URL to extract."),
    as_json: bool = typer.Option(
        False, "--json", help="Print the tool-call payload (content + isError) as JSON."
    ),
) -> None:
    """Fetch a URL and print its main content as Markdown to stdout."""
    from content_extractor.scraper.models import to_tool_payload
    from content_extractor.scraper.pipeline import extract_content

    result = asyncio.run(extract_content(url))
    if as_json:
        typer.echo(json.dumps(to_tool_payload(result), indent=2))
        raise typer.Exit(1 if result.is_error else 0)
    if result.is_error:
        typer.echo(result.text, err=True)
        raise typer.Exit(1)
    typer.echo(result.text)


# ---------------------------------------------------------------------------
# Servers
# ---------------------------------------------------------------------------
@app.command("serve-mcp")
def serve_mcp() -> None:
    """Serve the extract-content tool to an MCP client over stdio."""
    from content_extractor.mcp_server import serve

    asyncio.run(serve())


@app.command("serve-api")
def serve_api(
    host: str = typer.Option(settings.api_host, help="Interface to bind."),
    port: int = typer.Option(settings.api_port, help="Port to listen on."),
) -> None:
    """Serve the REST API with uvicorn."""
    import uvicorn

    typer.echo(f"[serve-api] Listening on http://{host}:{port}", err=True)
    uvicorn.run("content_extractor.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
