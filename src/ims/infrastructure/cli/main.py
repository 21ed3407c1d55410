from __future__ import annotations

import logging
from pathlib import Path

import click

from ims.infrastructure.cli.catalog_commands import (
    catalog_export,
    catalog_import,
    catalog_report,
)
from ims.infrastructure.cli.item_commands import (
    item_add,
    item_list,
    item_remove,
    item_show,
    item_update,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Catalog CSV file (default: $IMS_CATALOG or data/inventory.csv).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, catalog: Path | None, verbose: bool) -> None:
    """IMS — Inventory Management System"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    ctx.obj = catalog


@cli.group()
def item() -> None:
    """Manage items."""


# Register subcommands
item.add_command(item_add)
item.add_command(item_list)
item.add_command(item_remove)
item.add_command(item_show)
item.add_command(item_update)
cli.add_command(catalog_export)
cli.add_command(catalog_import)
cli.add_command(catalog_report)
