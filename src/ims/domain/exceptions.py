"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``field`` and ``rejected_value`` are set when the error concerns a
    single item property, so callers can point at the offending input.
    """

    def __init__(
        self,
        reason: str,
        field: str | None = None,
        rejected_value: object = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.field = field
        self.rejected_value = rejected_value


class DuplicateNameError(DomainException):
    """An item name is already taken within an inventory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Item '{name}' already exists in inventory")
        self.name = name


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OwnershipError(DomainException):
    """An item already belongs to another inventory."""


class ParseError(DomainException):
    """Record text could not be turned into item values."""

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        if line_number is not None:
            super().__init__(f"Line {line_number}: {reason}")
        else:
            super().__init__(reason)
        self.reason = reason
        self.line_number = line_number
