"""Parsing of compact ``row:column`` grid tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GridPosition:
    row: int
    column: int


def parse_grid_token(token: Optional[str]) -> Optional[GridPosition]:
    """Parse ``"<row>:<column>"`` into a :class:`GridPosition`.

    Returns ``None`` for anything else (missing token, wrong arity, non-integer
    or non-positive parts); callers treat that as absent grid data.
    """

    if not token or not isinstance(token, str):
        return None
    parts = token.strip().split(":")
    if len(parts) != 2:
        return None
    try:
        row, column = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if row < 1 or column < 1:
        return None
    return GridPosition(row=row, column=column)
