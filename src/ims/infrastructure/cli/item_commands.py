"""CLI commands for individual items."""

from __future__ import annotations

from pathlib import Path

import click

from ims.application.add_item import AddItemHandler
from ims.application.dto import ItemDTO
from ims.application.list_items import ListItemsHandler
from ims.application.remove_item import RemoveItemHandler
from ims.application.show_item import ShowItemHandler
from ims.application.update_item import UpdateItemHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.cli.session import load_inventory, open_catalog


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--weight", required=True, help="Weight in pounds (e.g. 2.5).")
@click.option("--price", required=True, help="Wholesale price (e.g. 10.00).")
@click.option("--quantity", required=True, help="Quantity in stock.")
@click.pass_obj
def item_add(catalog_path: Path | None, name: str, weight: str, price: str, quantity: str) -> None:
    """Add a new item to the inventory."""
    catalog = open_catalog(catalog_path)
    inventory = load_inventory(catalog)
    handler = AddItemHandler(inventory)

    try:
        dto = handler.handle(name=name, weight=weight, wholesale_price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    catalog.save(inventory)
    click.echo(f"Item '{dto.name}' added (retail price {dto.retail_price})")


@click.command("update")
@click.option("--name", required=True, help="Current item name.")
@click.option("--new-name", default=None, help="Rename the item.")
@click.option("--weight", default=None, help="New weight in pounds.")
@click.option("--price", default=None, help="New wholesale price.")
@click.option("--quantity", default=None, help="New quantity in stock.")
@click.pass_obj
def item_update(
    catalog_path: Path | None,
    name: str,
    new_name: str | None,
    weight: str | None,
    price: str | None,
    quantity: str | None,
) -> None:
    """Change an existing item. Only the given values change."""
    if new_name is None and weight is None and price is None and quantity is None:
        raise click.UsageError("Nothing to update: give at least one new value.")

    catalog = open_catalog(catalog_path)
    inventory = load_inventory(catalog)
    handler = UpdateItemHandler(inventory)

    try:
        dto = handler.handle(
            name=name,
            new_name=new_name,
            weight=weight,
            wholesale_price=price,
            quantity=quantity,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    catalog.save(inventory)
    click.echo(f"Item '{dto.name}' updated")


@click.command("remove")
@click.option("--name", required=True, help="Item name.")
@click.pass_obj
def item_remove(catalog_path: Path | None, name: str) -> None:
    """Remove an item from the inventory."""
    catalog = open_catalog(catalog_path)
    inventory = load_inventory(catalog)

    try:
        RemoveItemHandler(inventory).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    catalog.save(inventory)
    click.echo(f"Item '{name}' removed")


@click.command("show")
@click.option("--name", required=True, help="Item name.")
@click.pass_obj
def item_show(catalog_path: Path | None, name: str) -> None:
    """Show the details of one item."""
    inventory = load_inventory(open_catalog(catalog_path))

    try:
        dto = ShowItemHandler(inventory).handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_item(dto)


@click.command("list")
@click.option("--sort-by-name", is_flag=True, default=False, help="Sort items alphabetically.")
@click.pass_obj
def item_list(catalog_path: Path | None, sort_by_name: bool) -> None:
    """List all items, in the order they were added."""
    inventory = load_inventory(open_catalog(catalog_path))
    items = ListItemsHandler(inventory).handle(sort_by_name=sort_by_name)

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'Name':<24} {'Weight':>8} {'Wholesale':>12} {'Qty':>6} {'Retail':>12}")
    click.echo("-" * 66)
    for item in items:
        click.echo(
            f"{item.name:<24} {item.weight:>8g} {item.wholesale_price:>12} "
            f"{item.quantity:>6} {item.retail_price:>12}"
        )


def _display_item(dto: ItemDTO) -> None:
    click.echo(f"Item: {dto.name}")
    click.echo(f"  {'Weight (lbs):':<20} {dto.weight:g}")
    click.echo(f"  {'Wholesale price:':<20} {dto.wholesale_price}")
    click.echo(f"  {'Quantity:':<20} {dto.quantity}")
    click.echo(f"  {'Storage cost:':<20} {dto.storage_cost}")
    click.echo(f"  {'Retail price:':<20} {dto.retail_price}")
