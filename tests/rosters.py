"""Sample starting elevens shared by the test modules."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from pitchplan.models import RosterEntry


def make_roster(
    specs: Iterable[Tuple[Optional[str], Optional[str]]],
    *,
    prefix: str = "p",
) -> list[RosterEntry]:
    """Build a roster from ``(grid, position)`` pairs."""

    return [
        RosterEntry(player_id=f"{prefix}{index}", name=f"Player {index}", number=index, grid=grid, position=position)
        for index, (grid, position) in enumerate(specs, start=1)
    ]


GRID_4231 = [
    ("1:1", "G"),
    ("2:4", "D"),
    ("2:3", "D"),
    ("2:2", "D"),
    ("2:1", "D"),
    ("3:2", "M"),
    ("3:1", "M"),
    ("4:3", "M"),
    ("4:2", "M"),
    ("4:1", "M"),
    ("5:1", "F"),
]

CODES_433 = [
    (None, "GK"),
    (None, "LB"),
    (None, "CB"),
    (None, "CB"),
    (None, "RB"),
    (None, "CDM"),
    (None, "CM"),
    (None, "CM"),
    (None, "LW"),
    (None, "ST"),
    (None, "RW"),
]

BARE_CODES_4231 = [
    (None, "G"),
    (None, "D"),
    (None, "D"),
    (None, "D"),
    (None, "D"),
    (None, "M"),
    (None, "M"),
    (None, "M"),
    (None, "M"),
    (None, "M"),
    (None, "F"),
]

