"""Command-line interface for laying out a starting eleven."""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pitchplan.config import default_layout_key, get_layout, iter_layouts
from pitchplan.config_loader import MappingProfile
from pitchplan.ingest import RosterIngestError, load_roster_csv, load_roster_json
from pitchplan.layout import detect_formation, parse_formation, place_roster
from pitchplan.models import Placement, RosterEntry


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute pitch coordinates for a starting eleven")
    parser.add_argument("roster", type=Path, help="Path to roster CSV or lineup JSON")
    parser.add_argument("--formation", default=None, help="Formation label (inferred if omitted)")
    parser.add_argument(
        "--away",
        action="store_true",
        help="Lay out the non-reference (away) side, mirrored along the layout's axis",
    )
    parser.add_argument(
        "--layout",
        default=None,
        choices=sorted(layout.key for layout in iter_layouts()),
        help="Pitch presentation layout (default from PITCHPLAN_LAYOUT or 'split')",
    )
    parser.add_argument(
        "--roster-column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., position=Pos, name=First|Last)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional placements CSV path")
    parser.add_argument("--verbose", action="store_true", help="Log degraded inputs")
    return parser.parse_args(argv)


def _parse_mapping(entries: List[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _load_roster(path: Path, mapping: dict[str, str]) -> tuple[List[RosterEntry], Optional[str]]:
    if path.suffix.lower() == ".json":
        payload = load_roster_json(path, mapping=mapping or None)
        return payload.roster, payload.formation
    return load_roster_csv(path, mapping=mapping or None), None


def _write_placements(path: Path, placements: List[Placement]) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["player_id", "name", "number", "position", "grid", "x", "y"])
        for placement in placements:
            player = placement.player
            writer.writerow([
                player.player_id,
                player.name,
                "" if player.number is None else player.number,
                player.position or "",
                player.grid or "",
                f"{placement.field_position.x:g}",
                f"{placement.field_position.y:g}",
            ])


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        mapping = _parse_mapping(args.roster_column)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        mapping = profile.roster_mapping | mapping
    if args.save_profile:
        MappingProfile(mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    try:
        roster, payload_formation = _load_roster(args.roster, mapping)
    except RosterIngestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    layout = get_layout(args.layout or default_layout_key())
    parsed = parse_formation(args.formation or payload_formation)
    label = parsed.label if parsed is not None else detect_formation(roster)
    placements = place_roster(roster, label, not args.away, layout)

    print(f"Formation: {label or '-'}")
    if args.output:
        _write_placements(args.output, placements)
        print(f"Wrote {len(placements)} placements to {args.output}")
    else:
        for placement in placements:
            player = placement.player
            number = "" if player.number is None else f"#{player.number} "
            print(
                f"{number}{player.name or player.player_id}: "
                f"x={placement.field_position.x:g} y={placement.field_position.y:g}"
            )
    logger.debug("Laid out %s players on the %s layout", len(placements), layout.key)
    return 0


if __name__ == "__main__":
    sys.exit(main())
