"""Pydantic models for API I/O."""

from .placement import (
    FormationRequest,
    FormationResponse,
    LayoutResponse,
    PlacementRequest,
    PlacementResponse,
)

__all__ = [
    "FormationRequest",
    "FormationResponse",
    "LayoutResponse",
    "PlacementRequest",
    "PlacementResponse",
]
