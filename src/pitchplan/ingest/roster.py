"""Helpers to load lineup files and emit canonical roster entries."""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from pitchplan.layout.formation import normalize_formation
from pitchplan.models import RosterEntry


logger = logging.getLogger(__name__)


class RosterIngestError(ValueError):
    """Raised when a lineup file cannot be turned into roster entries."""


DEFAULT_ROSTER_MAPPING = {
    "player_id": "id",
    "name": "name",
    "number": "number",
    "grid": "grid",
    "position": "pos",
}


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str = ""
    raw_number: Optional[str] = None
    raw_grid: Optional[str] = None
    raw_position: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(key: str) -> Optional[str]:
            spec = mapping.get(key)
            if spec is None:
                return None
            columns = [part.strip() for part in spec.split("|")]
            parts = [str(row[col]).strip() for col in columns if row.get(col) not in (None, "")]
            return " ".join(parts) if parts else None

        return cls(
            raw_id=extract("player_id"),
            raw_name=extract("name") or "",
            raw_number=extract("number"),
            raw_grid=extract("grid"),
            raw_position=extract("position"),
        )


@dataclass(frozen=True)
class LineupPayload:
    roster: List[RosterEntry]
    formation: Optional[str] = None


def _parse_number(raw_number: Optional[str]) -> Optional[int]:
    if raw_number is None:
        return None
    text = raw_number.strip().lstrip("#").strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        logger.debug("Ignoring non-numeric shirt number %r", raw_number)
        return None
    if not value.is_integer() or value < 0:
        logger.debug("Ignoring invalid shirt number %r", raw_number)
        return None
    return int(value)


def rows_to_entries(rows: Sequence[RosterRow]) -> List[RosterEntry]:
    """Convert raw rows into roster entries.

    Rows without an identifier get a positional one (``"row-3"``) so that
    every row still produces an entry.
    """

    entries: List[RosterEntry] = []
    for index, row in enumerate(rows, start=1):
        player_id = row.raw_id or f"row-{index}"
        if not row.raw_id:
            logger.debug("Roster row %s has no player id; using %s", index, player_id)
        entries.append(
            RosterEntry(
                player_id=player_id,
                name=row.raw_name,
                number=_parse_number(row.raw_number),
                grid=row.raw_grid,
                position=row.raw_position,
            )
        )
    return entries


def parse_roster_csv(text: str, *, mapping: Mapping[str, str] | None = None) -> List[RosterEntry]:
    mapping = mapping or DEFAULT_ROSTER_MAPPING
    reader = csv.DictReader(StringIO(text))
    if not reader.fieldnames:
        raise RosterIngestError("Roster CSV has no header row")
    rows = [RosterRow.from_mapping(row, mapping) for row in reader]
    return rows_to_entries(rows)


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterEntry]:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise RosterIngestError(f"Unable to read roster file {path}: {exc}") from exc
    return parse_roster_csv(text, mapping=mapping)


def _player_dict(item: Any) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise RosterIngestError(f"Roster items must be objects, got {type(item).__name__}")
    nested = item.get("player")
    return nested if isinstance(nested, Mapping) else item


def parse_lineup_payload(payload: Any, *, mapping: Mapping[str, str] | None = None) -> LineupPayload:
    """Read a decoded lineup document.

    Accepts either a plain list of player objects or a team lineup object with
    a ``startXI`` list (players optionally wrapped as ``{"player": {...}}``)
    and an optional ``formation``.
    """

    mapping = mapping or DEFAULT_ROSTER_MAPPING
    formation: Optional[str] = None
    if isinstance(payload, Mapping):
        items = payload.get("startXI", payload.get("roster"))
        raw_formation = payload.get("formation")
        if isinstance(raw_formation, str):
            formation = normalize_formation(raw_formation) or None
    else:
        items = payload
    if not isinstance(items, list):
        raise RosterIngestError("Lineup payload has no player list")

    try:
        rows = [RosterRow.from_mapping(_player_dict(item), mapping) for item in items]
    except ValidationError as exc:
        raise RosterIngestError(f"Invalid roster row: {exc}") from exc
    return LineupPayload(roster=rows_to_entries(rows), formation=formation)


def load_roster_json(path: Path, *, mapping: Mapping[str, str] | None = None) -> LineupPayload:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RosterIngestError(f"Unable to read roster file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RosterIngestError(f"Roster file {path} is not valid JSON: {exc}") from exc
    return parse_lineup_payload(payload, mapping=mapping)
