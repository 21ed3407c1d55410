"""CSV-file-backed catalog: loads an Inventory by import, saves it by export."""

from __future__ import annotations

import logging
from pathlib import Path

from ims.application.export_inventory import ExportInventoryHandler
from ims.application.import_inventory import (
    FailurePolicy,
    ImportInventoryHandler,
    ImportResult,
)
from ims.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class CsvCatalogFile:

    def __init__(self, file_path: Path, policy: FailurePolicy = FailurePolicy.ABORT_FILE) -> None:
        self._file_path = file_path
        self._policy = policy
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> tuple[Inventory, ImportResult]:
        """Read the whole catalog into a fresh inventory."""
        inventory = Inventory()
        result = self.import_into(inventory, self._file_path)
        logger.debug("Loaded %d item(s) from %s", len(inventory), self._file_path)
        return inventory, result

    def import_into(self, inventory: Inventory, source: Path) -> ImportResult:
        handler = ImportInventoryHandler(inventory, policy=self._policy)
        with source.open(encoding="utf-8", newline="") as fh:
            return handler.handle(fh, source=str(source))

    def save(self, inventory: Inventory, target: Path | None = None) -> None:
        """Write the inventory out, replacing *target* only once fully written."""
        target = target or self._file_path
        target.parent.mkdir(parents=True, exist_ok=True)
        staging = target.with_name(target.name + ".tmp")
        lines = ExportInventoryHandler(inventory).handle()
        try:
            with staging.open("w", encoding="utf-8", newline="") as fh:
                fh.writelines(lines)
            staging.replace(target)
        except Exception:
            staging.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d item(s) to %s", len(inventory), target)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("", encoding="utf-8")
