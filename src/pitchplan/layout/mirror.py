"""Reflection of one team's coordinates for the non-reference side."""

from __future__ import annotations

from typing import List, Sequence, Union

from pitchplan.config import MirrorAxis, PitchLayout, resolve_layout
from pitchplan.models import FieldPosition, Placement


def mirror_position(position: FieldPosition, axis: MirrorAxis, precision: int) -> FieldPosition:
    """Reflect across the pitch centre line of ``axis`` (``x' = 100 - x`` or ``y' = 100 - y``).

    The result is rounded to ``precision`` decimals; on coordinates already at
    that precision, mirroring twice gives back the input exactly.
    """

    if MirrorAxis(axis) is MirrorAxis.X:
        return FieldPosition(x=round(100.0 - position.x, precision), y=position.y)
    return FieldPosition(x=position.x, y=round(100.0 - position.y, precision))


def orient_positions(
    positions: Sequence[FieldPosition],
    is_reference_side: bool,
    layout: PitchLayout,
) -> List[FieldPosition]:
    """Mirror a completed coordinate set unless it belongs to the reference side."""

    if is_reference_side:
        return list(positions)
    return [mirror_position(position, layout.mirror_axis, layout.precision) for position in positions]


def mirror_placements(
    placements: Sequence[Placement],
    layout: Union[str, PitchLayout, None] = None,
) -> List[Placement]:
    """Swap placements to the other side of ``layout``, at the precision they were laid out with."""

    pitch = resolve_layout(layout)
    return [
        Placement(
            player=placement.player,
            field_position=mirror_position(placement.field_position, pitch.mirror_axis, pitch.precision),
        )
        for placement in placements
    ]
