"""Mapping of tactical lines and grid slots to percentage pitch coordinates.

The pitch is vertical. ``PitchLayout.near_y`` is the team's own goal line and
``PitchLayout.far_y`` the extreme it attacks towards; every y below is a
fraction of that depth. x runs from the team's left touchline (0) to its
right touchline (100).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence

from pitchplan.config import PitchLayout
from pitchplan.layout.classify import ClassifiedPosition, LineType, Role, Side
from pitchplan.models import FieldPosition


logger = logging.getLogger(__name__)

CENTER_X = 50.0


class Band(float, Enum):
    """Depth of each tactical band, as a fraction of near -> far."""

    GOALKEEPER = 0.0
    DEFENCE = 0.2
    DEFENSIVE_MIDFIELD = 0.4
    MIDFIELD = 0.5
    ATTACKING_MIDFIELD = 0.6
    ATTACK = 0.8


# Upstream grid rows: 1 goalkeeper, 2 defence, 3-4 midfield, 5+ attack.
_GRID_ROW_DEPTH: Dict[int, float] = {
    1: 0.0,
    2: 0.1875,
    3: 0.4375,
    4: 0.65,
    5: 0.875,
    6: 0.9375,
    7: 1.0,
}

_SIDE_ORDER = {Side.LEFT: 0, Side.CENTER: 1, Side.NONE: 1, Side.RIGHT: 2}


def _point(x: float, y: float, layout: PitchLayout) -> FieldPosition:
    x = min(100.0, max(0.0, x))
    y = min(100.0, max(0.0, y))
    return FieldPosition(x=round(x, layout.precision), y=round(y, layout.precision))


def goalkeeper_position(layout: PitchLayout) -> FieldPosition:
    return _point(CENTER_X, layout.near_y, layout)


def default_position(layout: PitchLayout) -> FieldPosition:
    """Where a player without usable positional metadata is drawn."""

    return _point(CENTER_X, layout.depth(Band.MIDFIELD.value), layout)


def band_y(line: LineType, role: Role, layout: PitchLayout) -> float:
    """y of the band a classified player belongs to."""

    if line is LineType.GOALKEEPER:
        band = Band.GOALKEEPER
    elif line is LineType.DEFENDER:
        band = Band.DEFENCE
    elif line is LineType.FORWARD:
        band = Band.ATTACK
    elif role is Role.DEFENSIVE:
        band = Band.DEFENSIVE_MIDFIELD
    elif role is Role.OFFENSIVE:
        band = Band.ATTACKING_MIDFIELD
    else:
        band = Band.MIDFIELD
    return layout.depth(band.value)


def middle_band_ys(count: int, layout: PitchLayout) -> List[float]:
    """y of ``count`` midfield lines, spread from the defensive to the attacking band."""

    if count <= 0:
        return []
    if count == 1:
        return [layout.depth(Band.MIDFIELD.value)]
    low, high = Band.DEFENSIVE_MIDFIELD.value, Band.ATTACKING_MIDFIELD.value
    step = (high - low) / (count - 1)
    return [layout.depth(low + index * step) for index in range(count)]


def line_slots(count: int, layout: PitchLayout, *, narrowed: bool = False) -> List[float]:
    """x slots for ``count`` centre players sharing a line.

    Slots are symmetric about the centre, never further apart than
    ``max_spacing`` and never outside the touchline inset. ``narrowed`` keeps
    one spacing clear on each side for wide players pinned to the inset.
    """

    if count <= 0:
        return []
    if count == 1:
        return [CENTER_X]
    low = layout.touchline_inset
    high = 100.0 - layout.touchline_inset
    if narrowed:
        low += layout.max_spacing
        high -= layout.max_spacing
    width = max(0.0, min(high - low, layout.max_spacing * (count - 1)))
    start = CENTER_X - width / 2
    return [start + index * width / (count - 1) for index in range(count)]


def slot_x(slots: Sequence[float], index: int) -> float:
    """Slot ``index`` of a line, or the centre when the line has no such slot."""

    if 0 <= index < len(slots):
        return slots[index]
    logger.debug("Slot %s outside a %s-slot line; using centre", index, len(slots))
    return CENTER_X


def _wide_x(side: Side, depth: int, layout: PitchLayout) -> float:
    offset = min(layout.touchline_inset + depth * layout.max_spacing, CENTER_X)
    if side is Side.LEFT:
        return offset
    return 100.0 - offset


def _fit_between(slots: List[float], low: float, high: float) -> List[float]:
    """Spread ``slots`` evenly strictly inside ``(low, high)`` unless they already are."""

    if all(low < x < high for x in slots):
        return slots
    step = (high - low) / (len(slots) + 1)
    return [low + (index + 1) * step for index in range(len(slots))]


def distribute_line(
    members: Sequence[ClassifiedPosition],
    y: float,
    layout: PitchLayout,
) -> List[FieldPosition]:
    """Place the members of one line; the result is aligned with ``members``.

    Wide members are pinned to the touchline inset on their side; each further
    wide member on the same side steps one spacing inside the previous one.
    The rest share the centre width between the wide members, ordered left to
    right by side and otherwise by their order in ``members``.
    """

    positions: List[Optional[FieldPosition]] = [None] * len(members)
    central: List[int] = []
    edges = {Side.LEFT: layout.touchline_inset, Side.RIGHT: 100.0 - layout.touchline_inset}
    wide_counts = {Side.LEFT: 0, Side.RIGHT: 0}
    for index, member in enumerate(members):
        if member.wide and member.side in wide_counts:
            x = _wide_x(member.side, wide_counts[member.side], layout)
            positions[index] = _point(x, y, layout)
            edges[member.side] = x
            wide_counts[member.side] += 1
        else:
            central.append(index)

    central.sort(key=lambda index: _SIDE_ORDER[members[index].side])
    slots = line_slots(len(central), layout, narrowed=len(central) < len(members))
    if max(wide_counts.values()) > 1:
        slots = _fit_between(slots, edges[Side.LEFT], edges[Side.RIGHT])
    for slot, index in enumerate(central):
        positions[index] = _point(slot_x(slots, slot), y, layout)

    return [position for position in positions if position is not None]


def grid_to_field(row: int, column: int, max_columns: int, layout: PitchLayout) -> FieldPosition:
    """Coordinate of grid slot ``row:column`` in a row ``max_columns`` wide.

    Rows beyond the last mapped one sit on the far extreme of the layout.
    """

    width = max(max_columns, column, 1)
    x = 100.0 * column / (width + 1)
    y = layout.depth(_GRID_ROW_DEPTH.get(row, 1.0))
    return _point(x, y, layout)


def code_to_field(position: ClassifiedPosition, layout: PitchLayout) -> FieldPosition:
    """Coordinate of a lone classified player, without teammates to share a line with."""

    if position.line is LineType.GOALKEEPER:
        return goalkeeper_position(layout)
    y = band_y(position.line, position.role, layout)
    if position.wide and position.side in (Side.LEFT, Side.RIGHT):
        return _point(_wide_x(position.side, 0, layout), y, layout)
    if position.side is Side.LEFT:
        return _point(CENTER_X - layout.max_spacing, y, layout)
    if position.side is Side.RIGHT:
        return _point(CENTER_X + layout.max_spacing, y, layout)
    return _point(CENTER_X, y, layout)
