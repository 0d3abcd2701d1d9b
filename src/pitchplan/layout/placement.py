"""Placement of a starting eleven on the pitch diagram."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from pitchplan.config import PitchLayout, resolve_layout
from pitchplan.layout.classify import (
    DEFAULT_CLASSIFICATION,
    ClassifiedPosition,
    LineType,
    Role,
    classify_position,
    classify_roster,
)
from pitchplan.layout.coordinates import (
    Band,
    band_y,
    code_to_field,
    default_position,
    distribute_line,
    goalkeeper_position,
    grid_to_field,
    middle_band_ys,
)
from pitchplan.layout.formation import Formation, detect_formation, parse_formation
from pitchplan.layout.grid import GridPosition, parse_grid_token
from pitchplan.layout.mirror import orient_positions
from pitchplan.models import FieldPosition, Placement, RosterEntry


logger = logging.getLogger(__name__)


def _place_by_grid(
    roster: Sequence[RosterEntry],
    grids: Sequence[Optional[GridPosition]],
    layout: PitchLayout,
) -> List[FieldPosition]:
    row_max_columns: Dict[int, int] = {}
    for grid in grids:
        if grid is not None:
            row_max_columns[grid.row] = max(row_max_columns.get(grid.row, 0), grid.column)

    positions: List[FieldPosition] = []
    for entry, grid in zip(roster, grids):
        if grid is not None:
            positions.append(grid_to_field(grid.row, grid.column, row_max_columns[grid.row], layout))
        elif entry.position and entry.position.strip():
            logger.debug("No usable grid for player %s; placing by position %r", entry.player_id, entry.position)
            positions.append(code_to_field(classify_position(entry.position), layout))
        else:
            logger.debug("No usable grid or position for player %s; placing at centre", entry.player_id)
            positions.append(default_position(layout))
    return positions


def _resolve_formation(roster: Sequence[RosterEntry], label: Optional[str]) -> Optional[Formation]:
    if label:
        formation = parse_formation(label)
        if formation is not None:
            return formation
        logger.debug("Unparseable formation label %r; inferring from roster", label)
    return parse_formation(detect_formation(roster))


def _midfield_bands(
    indexes: Sequence[int],
    positions: Sequence[ClassifiedPosition],
    formation: Optional[Formation],
    layout: PitchLayout,
) -> List[tuple[float, List[int]]]:
    """Split midfielders into bands, returned as ``(y, member indexes)`` pairs."""

    sizes = formation.middle_lines if formation is not None else ()
    if len(sizes) <= 1:
        by_role: Dict[Role, List[int]] = {role: [] for role in Role}
        for index in indexes:
            by_role[positions[index].role].append(index)
        return [
            (band_y(LineType.MIDFIELDER, role, layout), members)
            for role, members in by_role.items()
            if members
        ]

    bands: List[List[int]] = [[] for _ in sizes]
    neutral: List[int] = []
    for index in indexes:
        role = positions[index].role
        if role is Role.DEFENSIVE:
            bands[0].append(index)
        elif role is Role.OFFENSIVE:
            bands[-1].append(index)
        else:
            neutral.append(index)

    surplus_band = (len(sizes) - 1) // 2
    for index in neutral:
        target = next(
            (band for band, size in enumerate(sizes) if len(bands[band]) < size),
            surplus_band,
        )
        bands[target].append(index)

    return [(y, members) for y, members in zip(middle_band_ys(len(sizes), layout), bands) if members]


def _has_position_codes(roster: Sequence[RosterEntry]) -> bool:
    return any(entry.position and entry.position.strip() for entry in roster)


def _order_groups(count: int, formation: Formation, layout: PitchLayout) -> List[tuple[float, List[int]]]:
    """Consecutive roster slices after the goalkeeper, one per formation line.

    The last line takes every remaining entry.
    """

    sizes = formation.lines
    ys = [layout.depth(Band.DEFENCE.value)]
    if len(sizes) >= 2:
        ys.extend(middle_band_ys(len(sizes) - 2, layout))
        ys.append(layout.depth(Band.ATTACK.value))

    groups: List[tuple[float, List[int]]] = []
    start = 1
    for line, (y, size) in enumerate(zip(ys, sizes)):
        end = count if line == len(sizes) - 1 else min(count, start + size)
        groups.append((y, list(range(start, end))))
        start = end
    return groups


def _place_by_order(
    roster: Sequence[RosterEntry],
    formation: Formation,
    layout: PitchLayout,
) -> List[FieldPosition]:
    """Lay out a roster without position codes from its order: keeper first, then defence to attack."""

    placed: List[FieldPosition] = [goalkeeper_position(layout)] + [default_position(layout)] * (len(roster) - 1)
    for y, members in _order_groups(len(roster), formation, layout):
        line_positions = distribute_line([DEFAULT_CLASSIFICATION] * len(members), y, layout)
        for index, position in zip(members, line_positions):
            placed[index] = position
    return placed


def _place_by_code(
    roster: Sequence[RosterEntry],
    formation: Optional[Formation],
    layout: PitchLayout,
) -> List[FieldPosition]:
    if formation is not None and not _has_position_codes(roster):
        logger.debug("No position codes in roster; placing by order as %s", formation)
        return _place_by_order(roster, formation, layout)

    positions = classify_roster(roster)
    placed: List[Optional[FieldPosition]] = [None] * len(roster)

    lines: Dict[LineType, List[int]] = {line: [] for line in LineType}
    for index, position in enumerate(positions):
        lines[position.line].append(index)

    for index in lines[LineType.GOALKEEPER]:
        placed[index] = goalkeeper_position(layout)

    groups: List[tuple[float, List[int]]] = [
        (layout.depth(Band.DEFENCE.value), lines[LineType.DEFENDER]),
        *_midfield_bands(lines[LineType.MIDFIELDER], positions, formation, layout),
        (layout.depth(Band.ATTACK.value), lines[LineType.FORWARD]),
    ]
    for y, members in groups:
        line_positions = distribute_line([positions[index] for index in members], y, layout)
        for index, position in zip(members, line_positions):
            placed[index] = position

    return [position if position is not None else default_position(layout) for position in placed]


def place_roster(
    roster: Sequence[RosterEntry],
    formation: Optional[str] = None,
    is_reference_side: bool = True,
    layout: Union[str, PitchLayout, None] = None,
) -> List[Placement]:
    """Compute a pitch coordinate for every player of a starting eleven.

    If any entry carries a parsable grid token the whole roster is laid out
    from grid rows; otherwise players are classified by position code and
    arranged in lines, using ``formation`` (inferred when missing) to split
    the midfield. The non-reference side is mirrored along the layout's mirror
    axis. Always returns one placement per roster entry, in roster order.
    """

    pitch = resolve_layout(layout)
    entries = list(roster)
    if not entries:
        return []

    grids = [parse_grid_token(entry.grid) for entry in entries]
    if any(grid is not None for grid in grids):
        positions = _place_by_grid(entries, grids, pitch)
    else:
        positions = _place_by_code(entries, _resolve_formation(entries, formation), pitch)

    positions = orient_positions(positions, is_reference_side, pitch)
    return [
        Placement(player=entry, field_position=position)
        for entry, position in zip(entries, positions)
    ]
