import logging

import click

from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_offload,
    product_remove,
    product_restock,
    product_show,
    product_stock,
    product_update,
)
from stockroom.infrastructure.config import Config


@click.group()
def cli() -> None:
    """Stockroom: bakery product inventory"""
    level = logging.getLevelName(Config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise click.BadParameter(
            f"Unknown log level '{Config.LOG_LEVEL}'.",
            param_hint="STOCKROOM_LOG_LEVEL",
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products and their stock."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_offload)
product.add_command(product_remove)
product.add_command(product_restock)
product.add_command(product_show)
product.add_command(product_stock)
product.add_command(product_update)
