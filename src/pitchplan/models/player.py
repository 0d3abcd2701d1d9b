"""Roster and placement models consumed by rendering code."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RosterEntry(BaseModel):
    """One player of a starting eleven, as supplied by the caller."""

    player_id: str = Field(..., min_length=1)
    name: str = ""
    number: Optional[int] = Field(default=None, ge=0)
    grid: Optional[str] = None
    position: Optional[str] = None

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class FieldPosition(BaseModel):
    """Percentage coordinate on the pitch diagram."""

    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)


class Placement(BaseModel):
    player: RosterEntry
    field_position: FieldPosition

    model_config = ConfigDict(frozen=True)
