"""CLI commands for provisioning the backing store."""

from __future__ import annotations

import click

from catalog.infrastructure.cli._runtime import run
from catalog.infrastructure.persistence.database import create_schema, drop_schema
from catalog.infrastructure.settings import Settings


@click.command("init")
@click.pass_obj
def db_init(settings: Settings) -> None:
    """Create the catalog tables."""
    run(settings, lambda container: create_schema(container.engine))
    click.echo("Catalog schema is ready.")


@click.command("drop")
@click.confirmation_option(prompt="This deletes every stored product. Continue?")
@click.pass_obj
def db_drop(settings: Settings) -> None:
    """Drop the catalog tables and all their data."""
    run(settings, lambda container: drop_schema(container.engine))
    click.echo("Catalog schema dropped.")
