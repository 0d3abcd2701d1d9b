"""Lightweight REST client for the pitchplan API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(raw: str) -> str | None:
    if not raw:
        return None
    try:
        json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc
    return raw


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pitchplan REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV or lineup JSON")
    parser.add_argument("--formation", default=None, help="Formation label (inferred if omitted)")
    parser.add_argument("--away", action="store_true", help="Request the mirrored (away) layout")
    parser.add_argument("--layout", default=None, help="Layout preset key")
    parser.add_argument("--roster-mapping", default="", help="JSON mapping for roster columns")
    parser.add_argument("--list-layouts", action="store_true", help="List layout presets and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_layouts:
            resp = client.get("/layouts")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            raise SystemExit("a roster file is required unless using --list-layouts")

        content_type = "application/json" if args.roster.suffix.lower() == ".json" else "text/csv"
        files = {"roster": (args.roster.name, args.roster.read_bytes(), content_type)}
        data = {
            "formation": args.formation,
            "is_reference_side": "false" if args.away else "true",
            "layout": args.layout,
            "roster_mapping": build_mapping(args.roster_mapping),
        }
        resp = client.post(
            "/placements/upload",
            files=files,
            data={key: value for key, value in data.items() if value is not None},
        )
        if resp.status_code == 400:
            raise SystemExit(f"rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        payload = resp.json()
        print(f"Formation: {payload['formation'] or '-'} ({payload['layout']} layout)")
        for placement in payload["placements"]:
            player = placement["player"]
            position = placement["field_position"]
            print(f"{player['name'] or player['player_id']}: x={position['x']} y={position['y']}")


if __name__ == "__main__":
    main()
