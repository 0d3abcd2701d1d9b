"""Canonical lineup models shared by the engine and its adapters."""

from .player import FieldPosition, Placement, RosterEntry

__all__ = ["FieldPosition", "Placement", "RosterEntry"]
