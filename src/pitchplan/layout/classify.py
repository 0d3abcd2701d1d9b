"""Classification of free-text position codes into tactical categories."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from pitchplan.models import RosterEntry


class LineType(str, Enum):
    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    FORWARD = "forward"


class Side(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    NONE = "none"


class Role(str, Enum):
    DEFENSIVE = "defensive"
    OFFENSIVE = "offensive"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ClassifiedPosition:
    """Tactical category of one player.

    ``wide`` marks touchline players (full-backs, wide midfielders, wingers).
    A side-tagged player that is not wide (``LCB``, ``LS``) stays inside the
    centre width but is ordered by its side.
    """

    line: LineType
    side: Side
    role: Role
    wide: bool = False


DEFAULT_CLASSIFICATION = ClassifiedPosition(LineType.MIDFIELDER, Side.CENTER, Role.NEUTRAL)
GOALKEEPER_CLASSIFICATION = ClassifiedPosition(LineType.GOALKEEPER, Side.NONE, Role.NEUTRAL)

_ABBREVIATION_MAX = 4

_GOALKEEPER_MARKERS = ("GK", "GOAL", "KEEPER")
_DEFENDER_MARKERS = ("B", "DEFENDER", "SWEEPER")
_DEFENDER_ABBREVIATIONS = ("SW",)
_DEFENSIVE_MID_MARKERS = ("DM", "DEFENSIVE", "HOLDING")
_ATTACKING_MID_MARKERS = ("AM", "ATTACKING", "OFFENSIVE")
_FORWARD_MARKERS = ("F", "W", "S", "ATT")


def _normalize(code: Optional[str]) -> str:
    return re.sub(r"[^A-Z]", "", (code or "").upper())


def _is_abbreviation(code: str) -> bool:
    return len(code) <= _ABBREVIATION_MAX


def _contains_any(code: str, markers: tuple[str, ...]) -> bool:
    return any(marker in code for marker in markers)


def _side_of(code: str) -> Side:
    if _is_abbreviation(code):
        for letter in (code[0], code[-1]):
            if letter == "L":
                return Side.LEFT
            if letter == "R":
                return Side.RIGHT
        return Side.CENTER
    if "LEFT" in code:
        return Side.LEFT
    if "RIGHT" in code:
        return Side.RIGHT
    return Side.CENTER


def _inside_channel(code: str) -> bool:
    """``LCB``/``RCM`` style codes and "left centre-back" style text."""

    if _is_abbreviation(code):
        return len(code) >= 3 and code[0] in "LR" and code[1] == "C"
    return "CENT" in code


def _is_goalkeeper(code: str) -> bool:
    return code == "G" or _contains_any(code, _GOALKEEPER_MARKERS)


def _is_defender(code: str) -> bool:
    if _contains_any(code, _DEFENDER_MARKERS) or code in _DEFENDER_ABBREVIATIONS:
        return True
    return code.startswith("D") and "M" not in code


def _classify_defender(code: str) -> ClassifiedPosition:
    side = _side_of(code)
    wide = side is not Side.CENTER and not _inside_channel(code)
    return ClassifiedPosition(LineType.DEFENDER, side, Role.DEFENSIVE, wide)


def _classify_midfielder(code: str) -> ClassifiedPosition:
    if _contains_any(code, _DEFENSIVE_MID_MARKERS):
        role = Role.DEFENSIVE
    elif _contains_any(code, _ATTACKING_MID_MARKERS):
        role = Role.OFFENSIVE
    else:
        role = Role.NEUTRAL
    side = _side_of(code)
    wide = role is Role.NEUTRAL and side is not Side.CENTER and not _inside_channel(code)
    return ClassifiedPosition(LineType.MIDFIELDER, side, role, wide)


def _classify_forward(code: str) -> ClassifiedPosition:
    if _is_abbreviation(code):
        if "LW" in code:
            return ClassifiedPosition(LineType.FORWARD, Side.LEFT, Role.OFFENSIVE, True)
        if "RW" in code:
            return ClassifiedPosition(LineType.FORWARD, Side.RIGHT, Role.OFFENSIVE, True)
    side = _side_of(code)
    wide = "WING" in code and side is not Side.CENTER
    return ClassifiedPosition(LineType.FORWARD, side, Role.OFFENSIVE, wide)


def classify_position(code: Optional[str]) -> ClassifiedPosition:
    """Classify a position code such as ``"G"``, ``"LWB"`` or ``"CDM"``.

    Total: unknown, empty or malformed codes classify as a neutral central
    midfielder.
    """

    normalized = _normalize(code)
    if not normalized:
        return DEFAULT_CLASSIFICATION
    if _is_goalkeeper(normalized):
        return GOALKEEPER_CLASSIFICATION
    if _is_defender(normalized):
        return _classify_defender(normalized)
    if "M" in normalized:
        return _classify_midfielder(normalized)
    if _contains_any(normalized, _FORWARD_MARKERS):
        return _classify_forward(normalized)
    return DEFAULT_CLASSIFICATION


def classify_roster(roster: Sequence[RosterEntry]) -> List[ClassifiedPosition]:
    """Classify every roster entry by its position code.

    When nothing classifies as a goalkeeper and the first entry carries no
    positional metadata at all, that entry is taken as the goalkeeper:
    upstream rosters list the keeper first.
    """

    positions = [classify_position(entry.position) for entry in roster]
    if not roster or any(p.line is LineType.GOALKEEPER for p in positions):
        return positions
    first = roster[0]
    if not _normalize(first.position) and not (first.grid or "").strip():
        positions[0] = GOALKEEPER_CLASSIFICATION
    return positions
