"""CLI entry point for the Course Catalog service."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click
import uvicorn

from coursecatalog.config import ConfigError, load_config
from coursecatalog.logging import setup_logging
from coursecatalog.store import Database

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="coursecatalog")
def main() -> None:
    """Course Catalog - manage courses, prerequisites and course instances."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a YAML config file",
)
@click.option("--host", default=None, help="Bind address (overrides config)")
@click.option("--port", type=int, default=None, help="Port (overrides config)")
@click.option("--db", "db_path", default=None, help="SQLite database path (overrides config)")
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    db_path: str | None,
) -> None:
    """Run the REST API server."""
    from coursecatalog.api.app import create_app  # noqa: PLC0415

    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    overrides = {
        key: value
        for key, value in {"host": host, "port": port, "db_path": db_path}.items()
        if value is not None
    }
    config = replace(config, **overrides)

    setup_logging(log_dir=config.log_dir, level=config.log_level)
    logger.info("Serving on %s:%s", config.host, config.port)

    uvicorn.run(create_app(config), host=config.host, port=config.port, log_config=None)


@main.command("init-db")
@click.option("--db", "db_path", default=None, help="SQLite database path")
def init_db(db_path: str | None) -> None:
    """Create the database tables if they don't exist."""
    try:
        config = load_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    database = Database(db_path or config.db_path)
    try:
        database.create_tables()
    finally:
        database.close()
    click.echo(f"Initialized database at {database.db_path}")


if __name__ == "__main__":
    main()
