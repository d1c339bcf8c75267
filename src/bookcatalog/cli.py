#!/usr/bin/env python3
"""
Main CLI entry point for the Book Catalog server.
"""

import json
import os
import sys

import click
import uvicorn

from bookcatalog import __version__
from bookcatalog.config import settings
from bookcatalog.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookcatalog")
def cli() -> None:
    """Book Catalog CLI - run the server and inspect the schema."""
    pass


def apply_serve_options(host: str, port: int, seed_path: str | None, log_level: str) -> None:
    """Push serve options into the live settings and the environment.

    The in-process app factory reads the already-built ``settings`` object,
    while a ``--reload`` subprocess rebuilds settings from the environment.
    """
    debug = log_level == "debug"

    settings.api_host = host
    settings.api_port = port
    settings.debug = debug
    settings.log_level = log_level
    if seed_path:
        settings.seed_data_path = seed_path

    os.environ["BOOKCATALOG_API_HOST"] = host
    os.environ["BOOKCATALOG_API_PORT"] = str(port)
    os.environ["BOOKCATALOG_DEBUG"] = "true" if debug else "false"
    os.environ["BOOKCATALOG_LOG_LEVEL"] = log_level
    if seed_path:
        os.environ["BOOKCATALOG_SEED_DATA_PATH"] = seed_path


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with the initial books",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, seed_path: str | None, log_level: str) -> None:
    """Start the Book Catalog API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Book Catalog API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    apply_serve_options(host, port, seed_path, log_level)

    try:
        # Catalog state is per process, so always run a single worker
        uvicorn.run(
            "bookcatalog.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema_command(output: str | None) -> None:
    """Print the GraphQL schema as an SDL document."""
    from bookcatalog.graphql.schema import export_schema

    sdl = export_schema()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


@cli.command()
@click.option(
    "--seed",
    "seed_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with the initial books",
)
def books(seed_path: str | None) -> None:
    """Print the seeded catalog as JSON."""
    from bookcatalog.catalog import SeedDataError, create_catalog

    try:
        catalog = create_catalog(seed_path or settings.seed_data_path)
    except SeedDataError as e:
        logger.error("Failed to load seed data", error=str(e))
        click.echo(f"✗ Error loading seed data: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps([book.model_dump() for book in catalog.list_books()], indent=2))


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
