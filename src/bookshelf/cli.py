#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf GraphQL server.
"""

import click

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help=f"Port to bind to, 0 for any free port (default: {settings.api_port})",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help=f"Log level (default: {settings.log_level.lower()})",
)
def serve(host: str | None, port: int | None, log_level: str | None) -> None:
    """Start the Bookshelf GraphQL server."""
    from bookshelf.server import serve as run_server

    log_level = (log_level or settings.log_level).lower()
    configure_logging(debug=settings.debug, level=log_level)

    logger.info(
        "Starting Bookshelf API server",
        host=host or settings.api_host,
        port=port if port is not None else settings.api_port,
        log_level=log_level,
        environment=settings.environment,
    )

    try:
        run_server(host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")


@cli.command()
def schema() -> None:
    """Print the GraphQL schema as SDL."""
    from bookshelf.graphql.schema import print_schema

    click.echo(print_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
