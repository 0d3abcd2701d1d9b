"""Configuration helpers for pitch presentation layouts."""

from .layouts import (
    MirrorAxis,
    PitchLayout,
    default_layout_key,
    get_layout,
    iter_layouts,
    resolve_layout,
)

__all__ = [
    "MirrorAxis",
    "PitchLayout",
    "default_layout_key",
    "get_layout",
    "iter_layouts",
    "resolve_layout",
]
