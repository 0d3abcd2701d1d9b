"""Formation labels: parsing, normalization and inference from a roster."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence, Tuple

from pitchplan.layout.classify import ClassifiedPosition, LineType, Role, classify_roster
from pitchplan.layout.grid import GridPosition, parse_grid_token
from pitchplan.models import RosterEntry


_DASHES = re.compile(r"[‐‑‒–—−－_/.]")

KNOWN_FORMATIONS: frozenset[str] = frozenset(
    {
        "4-4-2",
        "4-3-3",
        "4-5-1",
        "4-2-4",
        "3-5-2",
        "3-4-3",
        "5-3-2",
        "5-4-1",
        "4-2-3-1",
        "4-1-4-1",
        "4-3-2-1",
        "4-4-1-1",
        "4-2-2-2",
        "4-3-1-2",
        "4-1-2-1-2",
        "3-4-1-2",
        "3-4-2-1",
        "3-1-4-2",
        "3-5-1-1",
        "5-2-1-2",
        "5-2-2-1",
    }
)


@dataclass(frozen=True)
class Formation:
    """Outfield line sizes from defence to attack, e.g. ``(4, 2, 3, 1)``."""

    lines: Tuple[int, ...]

    @property
    def label(self) -> str:
        return "-".join(str(size) for size in self.lines)

    @property
    def outfield_players(self) -> int:
        return sum(self.lines)

    @property
    def middle_lines(self) -> Tuple[int, ...]:
        """Sizes of the lines between defence and attack."""

        return self.lines[1:-1]

    def __str__(self) -> str:
        return self.label


def normalize_formation(label: Optional[str]) -> str:
    """Strip whitespace and unify dash variants (``"4 – 3 – 3"`` -> ``"4-3-3"``)."""

    if not label:
        return ""
    return _DASHES.sub("-", re.sub(r"\s+", "", label))


def parse_formation(label: Optional[str]) -> Optional[Formation]:
    """Parse a formation label, returning ``None`` if it is not well formed."""

    normalized = normalize_formation(label)
    if not normalized:
        return None
    parts = normalized.split("-")
    if not all(part.isdigit() for part in parts):
        return None
    return Formation(lines=tuple(int(part) for part in parts))


def _join(sizes: Sequence[int]) -> str:
    return "-".join(str(size) for size in sizes)


# -- grid mode -------------------------------------------------------------

RowCounts = Mapping[int, int]

# Ordered; the first matching entry wins. Rows are the upstream grid rows:
# 2 is the defensive line, 3 and 4 the midfield rows and 5 the attack.
_GRID_EXCEPTIONS: Tuple[Tuple[str, Callable[[RowCounts], bool]], ...] = (
    ("4-2-3-1", lambda r: (r[2], r[3], r[4], r[5]) == (4, 2, 3, 1)),
    # Wingers dropped one row behind the striker.
    ("4-3-3", lambda r: (r[2], r[3], r[4], r[5]) == (4, 3, 2, 1)),
    ("3-4-1-2", lambda r: (r[2], r[3], r[4], r[5]) == (3, 4, 1, 2)),
    ("3-5-2", lambda r: r[2] == 3 and r[3] + r[4] == 5 and r[5] == 2),
    ("5-3-2", lambda r: r[2] == 5 and r[3] + r[4] == 3 and r[5] == 2),
)


def _grid_row_counts(grids: Sequence[GridPosition]) -> Counter[int]:
    return Counter(grid.row for grid in grids if grid.row > 1)


def formation_from_rows(row_counts: RowCounts) -> Optional[str]:
    """Infer a formation label from outfield grid row populations."""

    counts: Counter[int] = Counter({row: n for row, n in row_counts.items() if row > 1 and n > 0})
    if not counts:
        return None

    for label, matches in _GRID_EXCEPTIONS:
        if matches(counts):
            return label

    sizes = [counts[row] for row in sorted(counts)]
    full = _join(sizes)
    if len(sizes) <= 3 or full in KNOWN_FORMATIONS:
        return full
    return _join([sizes[0], sum(sizes[1:-1]), sizes[-1]])


# -- code mode -------------------------------------------------------------

@dataclass(frozen=True)
class LineCounts:
    defenders: int = 0
    midfielders: int = 0
    forwards: int = 0
    defensive_mids: int = 0
    offensive_mids: int = 0

    @property
    def neutral_mids(self) -> int:
        return self.midfielders - self.defensive_mids - self.offensive_mids

    @classmethod
    def from_classifications(cls, positions: Sequence[ClassifiedPosition]) -> "LineCounts":
        lines = Counter(position.line for position in positions)
        mids = [position for position in positions if position.line is LineType.MIDFIELDER]
        return cls(
            defenders=lines[LineType.DEFENDER],
            midfielders=lines[LineType.MIDFIELDER],
            forwards=lines[LineType.FORWARD],
            defensive_mids=sum(1 for mid in mids if mid.role is Role.DEFENSIVE),
            offensive_mids=sum(1 for mid in mids if mid.role is Role.OFFENSIVE),
        )


_CODE_EXCEPTIONS: Tuple[Tuple[str, Callable[[LineCounts], bool]], ...] = (
    (
        "4-2-3-1",
        lambda c: (c.defenders, c.defensive_mids, c.offensive_mids, c.forwards) == (4, 2, 3, 1),
    ),
    # Upstream rosters with bare "M" codes and a lone striker are 4-2-3-1s.
    (
        "4-2-3-1",
        lambda c: (c.defenders, c.midfielders, c.forwards) == (4, 5, 1) and c.neutral_mids == 5,
    ),
)


def formation_from_counts(counts: LineCounts) -> Optional[str]:
    """Infer a formation label from per-line player counts."""

    if counts.defenders + counts.midfielders + counts.forwards == 0:
        return None

    for label, matches in _CODE_EXCEPTIONS:
        if matches(counts):
            return label

    if counts.defensive_mids or counts.offensive_mids:
        bands = [counts.defensive_mids, counts.neutral_mids, counts.offensive_mids]
        role_label = _join([counts.defenders, *(n for n in bands if n), counts.forwards])
        if role_label in KNOWN_FORMATIONS:
            return role_label

    return _join([counts.defenders, counts.midfielders, counts.forwards])


# -- entry point -----------------------------------------------------------

def detect_formation(roster: Sequence[RosterEntry]) -> Optional[str]:
    """Infer a canonical formation label for a starting eleven.

    Grid tokens take precedence: if any entry carries a parsable one, the
    label is read from the grid rows. Otherwise position codes are counted.
    Returns ``None`` when the roster has no outfield players.
    """

    grids = [grid for grid in (parse_grid_token(entry.grid) for entry in roster) if grid]
    if grids:
        return formation_from_rows(_grid_row_counts(grids))

    positions = classify_roster(roster)
    return formation_from_counts(LineCounts.from_classifications(positions))
