"""Application service: Import Inventory use case.

Reads CSV records line by line and adds one item per line. A line that
cannot be parsed, fails validation, or repeats a name already in the
inventory adds nothing; what happens next depends on the failure policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ims.application.csv_format import parse_record
from ims.domain.exceptions import DomainException
from ims.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class FailurePolicy(Enum):
    SKIP_LINE = "line"  # report the bad line, keep going
    ABORT_FILE = "file"  # stop at the first bad line


@dataclass(frozen=True)
class ImportFailure:
    line_number: int
    reason: str


@dataclass
class ImportResult:
    """Outcome of importing one source."""

    source: str
    added: int = 0
    failures: list[ImportFailure] = field(default_factory=list)
    aborted: bool = False

    @property
    def succeeded(self) -> bool:
        return not self.failures


class ImportInventoryHandler:

    def __init__(
        self,
        inventory: Inventory,
        policy: FailurePolicy = FailurePolicy.ABORT_FILE,
    ) -> None:
        self._inventory = inventory
        self._policy = policy

    def handle(self, lines: Iterable[str], source: str = "<input>") -> ImportResult:
        """Add every record in *lines* to the inventory.

        Items from lines read before a failure stay in the inventory
        under both policies; nothing is rolled back.
        """
        result = ImportResult(source=source)

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                item = parse_record(line).to_item()
                self._inventory.add(item)
            except DomainException as exc:
                result.failures.append(ImportFailure(line_number, str(exc)))
                logger.info("%s line %d rejected: %s", source, line_number, exc)
                if self._policy is FailurePolicy.ABORT_FILE:
                    result.aborted = True
                    break
                continue
            result.added += 1
            logger.debug("%s line %d added %r", source, line_number, item.name)

        logger.info(
            "Imported %d item(s) from %s (%d failure(s)%s)",
            result.added,
            source,
            len(result.failures),
            ", aborted" if result.aborted else "",
        )
        return result
