"""Composition root — resolves configuration and wires the catalog file.

This is the only place in the codebase that reads the environment.
Every other module receives its settings as arguments.
"""

from __future__ import annotations

import os
from pathlib import Path

from ims.application.import_inventory import FailurePolicy
from ims.infrastructure.persistence.csv_catalog_file import CsvCatalogFile

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

CATALOG_ENV = "IMS_CATALOG"
POLICY_ENV = "IMS_IMPORT_POLICY"


def catalog_path(override: str | Path | None = None) -> Path:
    if override:
        return Path(override)
    from_env = os.environ.get(CATALOG_ENV)
    if from_env:
        return Path(from_env)
    return _DATA_DIR / "inventory.csv"


def import_policy(override: str | None = None) -> FailurePolicy:
    """Resolve the failure policy name (``line`` or ``file``).

    Raises ValueError for unknown names.
    """
    name = override or os.environ.get(POLICY_ENV) or FailurePolicy.ABORT_FILE.value
    return FailurePolicy(name.strip().lower())


def catalog_file(path: str | Path | None = None, policy: str | None = None) -> CsvCatalogFile:
    return CsvCatalogFile(catalog_path(path), policy=import_policy(policy))
