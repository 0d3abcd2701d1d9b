"""Tactical formation layout engine for lineup pitch diagrams."""

from pitchplan.layout import detect_formation, place_roster
from pitchplan.models import FieldPosition, Placement, RosterEntry

__all__ = [
    "FieldPosition",
    "Placement",
    "RosterEntry",
    "detect_formation",
    "place_roster",
]
