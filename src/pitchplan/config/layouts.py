"""Pitch geometry presets for the supported presentation modes."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Union


logger = logging.getLogger(__name__)

_LAYOUT_ENV = "PITCHPLAN_LAYOUT"
_LAYOUT_DEFAULT = "split"


class MirrorAxis(str, Enum):
    """Axis reflected for the non-reference side."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class PitchLayout:
    """Geometry of one team's drawing area.

    ``near_y`` is the team's own goal line (where the goalkeeper stands) and
    ``far_y`` the extreme it attacks towards. Both are percentages of the
    pitch height; ``near_y`` may be larger or smaller than ``far_y``.
    """

    key: str
    description: str
    near_y: float
    far_y: float
    mirror_axis: MirrorAxis
    touchline_inset: float = 15.0
    max_spacing: float = 25.0
    precision: int = 2

    def depth(self, fraction: float) -> float:
        """Return the y value ``fraction`` of the way from near to far."""

        return self.near_y + fraction * (self.far_y - self.near_y)


_LAYOUTS: Dict[str, PitchLayout] = {
    "split": PitchLayout(
        key="split",
        description="Each team on its own vertical pitch; the away side is flipped left/right.",
        near_y=90.0,
        far_y=10.0,
        mirror_axis=MirrorAxis.X,
    ),
    "full": PitchLayout(
        key="full",
        description="Both teams on one vertical pitch, each in its own half; the away side is flipped near/far.",
        near_y=95.0,
        far_y=55.0,
        mirror_axis=MirrorAxis.Y,
    ),
}


def iter_layouts() -> Iterable[PitchLayout]:
    """Return an iterator of all configured layouts."""

    return _LAYOUTS.values()


def get_layout(key: str) -> PitchLayout:
    """Fetch a layout preset by key, raising KeyError if missing."""

    normalized = key.strip().lower()
    if normalized not in _LAYOUTS:
        raise KeyError(f"No pitch layout configured for key={key!r}")
    return _LAYOUTS[normalized]


def resolve_layout(layout: Union[str, PitchLayout, None]) -> PitchLayout:
    """Accept a preset key, a layout instance or ``None`` (the default preset)."""

    if layout is None:
        return _LAYOUTS[_LAYOUT_DEFAULT]
    if isinstance(layout, PitchLayout):
        return layout
    if not isinstance(layout, str):
        raise TypeError("layout must be a str key or a PitchLayout")
    return get_layout(layout)


def default_layout_key(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    raw = env.get(_LAYOUT_ENV)
    if raw is None:
        return _LAYOUT_DEFAULT
    key = raw.strip().lower()
    if key not in _LAYOUTS:
        logger.warning("Invalid layout for %s: %s; using default %s", _LAYOUT_ENV, raw, _LAYOUT_DEFAULT)
        return _LAYOUT_DEFAULT
    return key
