"""CSV record format for importing and exporting items.

One item per line: ``name,weight,wholesale_price,quantity``.

Only the name can contain commas or double quotes. Such a name is
enclosed in double quotes and every quote inside it is doubled::

    Widget,2.0,10.0,3
    "Bolts, assorted",0.5,1.25,100
    "12"" ruler",0.2,3.0,7
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.application.fields import parse_float, parse_int
from ims.domain.exceptions import ParseError
from ims.domain.model.item import Item

FIELD_COUNT = 4


@dataclass(frozen=True)
class ItemRecord:
    """The four base values of an item as read from one line."""

    name: str
    weight: float
    wholesale_price: float
    quantity: int

    def to_item(self) -> Item:
        return Item(self.name, self.weight, self.wholesale_price, self.quantity)


# --- Writing ------------------------------------------------------------------


def escape_name(name: str) -> str:
    if "," not in name and '"' not in name:
        return name
    return '"' + name.replace('"', '""') + '"'


def format_record(item: Item) -> str:
    return ",".join(
        [
            escape_name(item.name),
            str(item.weight),
            str(item.wholesale_price),
            str(item.quantity),
        ]
    )


# --- Reading ------------------------------------------------------------------


def split_record(line: str) -> list[str]:
    """Split a line into its raw fields, unescaping a quoted name.

    Raises ParseError unless exactly four fields are present.
    """
    if '"' not in line:
        fields = line.split(",")
    else:
        name, rest = _read_quoted_name(line)
        fields = [name, *rest.split(",")]

    if len(fields) != FIELD_COUNT:
        raise ParseError(f"Expected {FIELD_COUNT} fields, found {len(fields)}")
    return fields


def parse_record(line: str) -> ItemRecord:
    name, weight, price, quantity = split_record(line.rstrip("\r\n"))
    return ItemRecord(
        name=name,
        weight=parse_float("weight", weight),
        wholesale_price=parse_float("wholesale price", price),
        quantity=parse_int("quantity", quantity),
    )


def _read_quoted_name(line: str) -> tuple[str, str]:
    """Return the unescaped quoted name and the text after its comma."""
    if not line.startswith('"'):
        raise ParseError("Names containing a double quote must be enclosed in quotes")

    chars: list[str] = []
    index = 1
    while index < len(line):
        char = line[index]
        if char == '"':
            if line.startswith('"', index + 1):
                chars.append('"')
                index += 2
                continue
            rest = line[index + 1:]
            if not rest.startswith(","):
                raise ParseError("Expected a comma after the quoted name")
            return "".join(chars), rest[1:]
        chars.append(char)
        index += 1

    raise ParseError("Unterminated quoted name")
