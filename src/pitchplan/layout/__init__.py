"""Formation detection and coordinate layout for starting elevens."""

from .classify import ClassifiedPosition, LineType, Role, Side, classify_position, classify_roster
from .formation import (
    KNOWN_FORMATIONS,
    Formation,
    detect_formation,
    normalize_formation,
    parse_formation,
)
from .grid import GridPosition, parse_grid_token
from .mirror import mirror_placements, mirror_position, orient_positions
from .placement import place_roster

__all__ = [
    "ClassifiedPosition",
    "Formation",
    "GridPosition",
    "KNOWN_FORMATIONS",
    "LineType",
    "Role",
    "Side",
    "classify_position",
    "classify_roster",
    "detect_formation",
    "mirror_placements",
    "mirror_position",
    "normalize_formation",
    "orient_positions",
    "parse_formation",
    "parse_grid_token",
    "place_roster",
]
