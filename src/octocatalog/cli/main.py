"""octocatalog CLI -- run the responder and work with catalog files.

Thin wrapper around the application factory using click.
"""

from __future__ import annotations

import time

import click
import uvicorn

from octocatalog.app import create_app
from octocatalog.catalog import load_catalog
from octocatalog.config import Settings
from octocatalog.errors import ConfigError
from octocatalog.signature import SIGNATURE_HEADER, TIMESTAMP_HEADER, compute_signature


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="octocatalog")
def cli() -> None:
    """octocatalog -- Slack external-select options responder."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
@click.option("--port", type=int, default=None, help="Bind port (default: $PORT or 8080).")
def serve(host: str | None, port: int | None) -> None:
    """Load settings and catalog, then serve requests."""
    try:
        settings = Settings()
        app = create_app(settings)
    except ConfigError as exc:
        _error(f"Error: {exc}")
        return

    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.command("check-catalog")
@click.argument("path", type=click.Path(dir_okay=False))
def check_catalog(path: str) -> None:
    """Validate a catalog file and summarize its entries."""
    try:
        catalog = load_catalog(path)
    except ConfigError as exc:
        _error(f"Error: {exc}")
        return

    for entry in catalog:
        click.echo(f"{entry.action_id}\t{len(entry.options)} option(s)")
    click.echo(f"{len(catalog)} catalog entries OK")


@cli.command()
@click.option("--secret", envvar="SLACK_SIGNING_SECRET", required=True, help="Signing secret.")
@click.option("--timestamp", default=None, help="Unix timestamp (default: now).")
@click.argument("body")
def sign(secret: str, timestamp: str | None, body: str) -> None:
    """Print Slack signature headers for BODY (for local testing)."""
    if timestamp is None:
        timestamp = str(int(time.time()))
    signature = compute_signature(secret, timestamp, body.encode("utf-8"))
    click.echo(f"{TIMESTAMP_HEADER}: {timestamp}")
    click.echo(f"{SIGNATURE_HEADER}: {signature}")

