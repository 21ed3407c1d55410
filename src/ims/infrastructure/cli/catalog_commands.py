"""CLI commands for the catalog as a whole: report, import, export."""

from __future__ import annotations

from pathlib import Path

import click

from ims.application.show_report import ShowReportHandler
from ims.infrastructure.cli.session import load_inventory, open_catalog


@click.command("report")
@click.pass_obj
def catalog_report(catalog_path: Path | None) -> None:
    """Show inventory totals."""
    inventory = load_inventory(open_catalog(catalog_path))
    report = ShowReportHandler(inventory).handle()

    click.echo("Inventory Report")
    click.echo(f"Total Products: {report.total_products}")
    click.echo(f"Items in Stock: {report.items_in_stock:,}")
    click.echo(f"Total Wholesale Price: {report.total_wholesale}")
    click.echo(f"Total Retail Price: {report.total_retail}")


@click.command("import")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--policy",
    type=click.Choice(["line", "file"]),
    default=None,
    help="On a bad line: skip just that line, or stop reading the file (default).",
)
@click.pass_obj
def catalog_import(catalog_path: Path | None, files: tuple[Path, ...], policy: str | None) -> None:
    """Import items from CSV files into the catalog."""
    catalog = open_catalog(catalog_path, policy)
    inventory = load_inventory(catalog)

    failed = 0
    for path in files:
        try:
            result = catalog.import_into(inventory, path)
        except (OSError, UnicodeDecodeError) as exc:
            raise click.FileError(str(path), hint=str(exc))

        click.echo(f"{path}: {result.added} item(s) imported")
        for failure in result.failures:
            click.echo(f"  line {failure.line_number}: {failure.reason}", err=True)
        if result.aborted:
            click.echo("  remaining lines were not read", err=True)
        failed += len(result.failures)

    catalog.save(inventory)

    if failed:
        raise click.ClickException(f"{failed} line(s) could not be imported")


@click.command("export")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def catalog_export(catalog_path: Path | None, output: Path) -> None:
    """Write the catalog to another CSV file."""
    catalog = open_catalog(catalog_path)
    inventory = load_inventory(catalog)

    try:
        catalog.save(inventory, target=output)
    except OSError as exc:
        raise click.FileError(str(output), hint=str(exc))

    click.echo(f"Exported {len(inventory)} item(s) to {output}")
