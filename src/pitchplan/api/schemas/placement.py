from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

from pitchplan.models import Placement, RosterEntry


class FormationRequest(BaseModel):
    roster: List[RosterEntry] = Field(default_factory=list)


class FormationResponse(BaseModel):
    formation: str | None


class PlacementRequest(BaseModel):
    roster: List[RosterEntry] = Field(default_factory=list)
    formation: str | None = None
    is_reference_side: bool = True
    layout: str | None = None


class PlacementResponse(BaseModel):
    formation: str | None
    layout: str
    placements: List[Placement]


class LayoutResponse(BaseModel):
    key: str
    description: str
    near_y: float
    far_y: float
    mirror_axis: Literal["x", "y"]
