"""Application service: Show Report use case (query)."""

from __future__ import annotations

from ims.application.dto import InventoryReportDTO
from ims.domain.model.inventory import Inventory


class ShowReportHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> InventoryReportDTO:
        return InventoryReportDTO.from_inventory(self._inventory)
