#!/usr/bin/env python3
"""
Main CLI entry point for the Registrar backend server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from registrar import __version__
from registrar.config import settings
from registrar.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="registrar")
def cli() -> None:
    """Registrar CLI - run the API server and manage its database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: REGISTRAR_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: PORT / REGISTRAR_API_PORT or 9090)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Start the Registrar API server."""
    host = host or settings.api_host
    port = port or settings.api_port

    configure_logging(debug=(log_level == "debug"))

    # Reloader subprocesses build their own settings from the environment
    settings.api_port = port
    os.environ["PORT"] = str(port)
    if log_level == "debug":
        os.environ["REGISTRAR_DEBUG"] = "true"
        os.environ["REGISTRAR_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("REGISTRAR_LOG_LEVEL", log_level)

    logger.info(
        "Starting Registrar API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        uvicorn.run(
            "registrar.api.app:create_app",
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


@cli.command("init-db")
def init_db() -> None:
    """Create any missing tables directly from the ORM models."""
    from registrar.database.connection import create_tables, dispose_database

    configure_logging()

    async def do_init():
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Tables created")


@cli.command()
def seed() -> None:
    """Seed the database with sample data."""
    from registrar.database.connection import dispose_database
    from registrar.database.seed_data import seed_sample_data
    from registrar.repository import SqlAlchemyRepository

    configure_logging()

    async def do_seed():
        try:
            return await seed_sample_data(SqlAlchemyRepository())
        finally:
            await dispose_database()

    try:
        created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database seeded successfully")
    for entity, count in created.items():
        click.echo(f"  {entity}: {count} created")


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema as SDL."""
    from registrar.graphql.schema import schema

    sdl = schema.as_str()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
