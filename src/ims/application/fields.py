"""Parsing of textual item values (form input, CSV fields)."""

from __future__ import annotations

import math

from ims.domain.exceptions import ParseError


def parse_float(label: str, raw: str) -> float:
    """Parse a decimal number such as ``"2.5"``; must be finite."""
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise ParseError(f"Invalid number for {label}: {raw!r}") from exc
    if not math.isfinite(value):
        raise ParseError(f"Invalid number for {label}: {raw!r}")
    return value


def parse_int(label: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ParseError(f"Invalid whole number for {label}: {raw!r}") from exc
