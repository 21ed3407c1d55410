"""Shared helpers for opening the catalog from CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from ims.domain.model.inventory import Inventory
from ims.infrastructure.bootstrap import catalog_file
from ims.infrastructure.persistence.csv_catalog_file import CsvCatalogFile


def open_catalog(path: Path | None, policy: str | None = None) -> CsvCatalogFile:
    try:
        return catalog_file(path, policy)
    except ValueError:
        raise click.BadParameter(
            "Unknown import policy. Expected 'line' or 'file'.",
            param_hint="IMS_IMPORT_POLICY" if policy is None else "--policy",
        )
    except OSError as exc:
        raise click.FileError(str(path), hint=str(exc))


def load_inventory(catalog: CsvCatalogFile) -> Inventory:
    """Load the catalog, refusing to continue if any line is unreadable.

    A partially loaded catalog must never be saved back over the file.
    """
    try:
        inventory, result = catalog.load()
    except (OSError, UnicodeDecodeError) as exc:
        raise click.FileError(str(catalog.path), hint=str(exc))

    if not result.succeeded:
        details = "; ".join(
            f"line {failure.line_number}: {failure.reason}" for failure in result.failures
        )
        raise click.ClickException(f"Catalog {catalog.path} has unreadable lines ({details})")
    return inventory
