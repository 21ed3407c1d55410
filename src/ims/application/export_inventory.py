"""Application service: Export Inventory use case."""

from __future__ import annotations

from typing import Iterator

from ims.application.csv_format import format_record
from ims.domain.model.inventory import Inventory


class ExportInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> Iterator[str]:
        """Yield one CSV line (newline included) per item, in insertion order."""
        for item in self._inventory:
            yield format_record(item) + "\n"
