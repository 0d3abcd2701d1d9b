"""Input adapters that normalize raw lineup data into roster entries."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    LineupPayload,
    RosterIngestError,
    RosterRow,
    load_roster_csv,
    load_roster_json,
    parse_lineup_payload,
    parse_roster_csv,
    rows_to_entries,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "LineupPayload",
    "RosterIngestError",
    "RosterRow",
    "load_roster_csv",
    "load_roster_json",
    "parse_lineup_payload",
    "parse_roster_csv",
    "rows_to_entries",
]
