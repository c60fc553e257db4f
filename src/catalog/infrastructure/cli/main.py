import logging

import click

from catalog.infrastructure.cli.db_commands import db_drop, db_init
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_show,
    product_update,
)
from catalog.infrastructure.settings import ConfigurationError, Settings


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Product catalog"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def db() -> None:
    """Manage the catalog database."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
db.add_command(db_drop)
db.add_command(db_init)
