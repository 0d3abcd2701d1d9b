"""REST API exposing the formation layout engine."""

from __future__ import annotations

import json
import logging
from pathlib import PurePath
from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from pitchplan.api.schemas import (
    FormationRequest,
    FormationResponse,
    LayoutResponse,
    PlacementRequest,
    PlacementResponse,
)
from pitchplan.config import PitchLayout, default_layout_key, get_layout, iter_layouts
from pitchplan.ingest import (
    DEFAULT_ROSTER_MAPPING,
    RosterIngestError,
    parse_lineup_payload,
    parse_roster_csv,
)
from pitchplan.layout import detect_formation, parse_formation, place_roster
from pitchplan.models import RosterEntry


logger = logging.getLogger(__name__)


def _layout_or_400(key: Optional[str]) -> PitchLayout:
    try:
        return get_layout(key or default_layout_key())
    except KeyError as exc:
        raise HTTPException(status_code=400, detail=f"Unknown layout {key!r}") from exc


def _decode_mapping(raw: Optional[str]) -> dict[str, str]:
    if not raw:
        return DEFAULT_ROSTER_MAPPING.copy()
    try:
        mapping = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise HTTPException(status_code=400, detail="Mapping must be a JSON object")
    return DEFAULT_ROSTER_MAPPING | {str(k): str(v) for k, v in mapping.items()}


def _roster_from_upload(filename: str, content: bytes, mapping: dict[str, str]) -> tuple[List[RosterEntry], Optional[str]]:
    text = content.decode("utf-8-sig")
    if PurePath(filename).suffix.lower() == ".json":
        try:
            payload = parse_lineup_payload(json.loads(text), mapping=mapping)
        except json.JSONDecodeError as exc:
            raise RosterIngestError(f"Roster file is not valid JSON: {exc}") from exc
        return payload.roster, payload.formation

    return parse_roster_csv(text, mapping=mapping), None


def _placement_response(
    roster: List[RosterEntry],
    formation: Optional[str],
    is_reference_side: bool,
    layout: PitchLayout,
) -> PlacementResponse:
    parsed = parse_formation(formation)
    label = parsed.label if parsed is not None else detect_formation(roster)
    placements = place_roster(roster, label, is_reference_side, layout)
    logger.info(
        "Placed %s players (formation=%s, layout=%s, reference=%s)",
        len(placements),
        label,
        layout.key,
        is_reference_side,
    )
    return PlacementResponse(formation=label, layout=layout.key, placements=placements)


def create_app() -> FastAPI:
    app = FastAPI(title="pitchplan layout engine")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/layouts", response_model=list[LayoutResponse])
    async def layouts() -> list[LayoutResponse]:
        return [
            LayoutResponse(
                key=layout.key,
                description=layout.description,
                near_y=layout.near_y,
                far_y=layout.far_y,
                mirror_axis=layout.mirror_axis.value,
            )
            for layout in iter_layouts()
        ]

    @app.post("/formation", response_model=FormationResponse)
    async def formation(request: FormationRequest) -> FormationResponse:
        return FormationResponse(formation=detect_formation(request.roster))

    @app.post("/placements", response_model=PlacementResponse)
    async def placements(request: PlacementRequest) -> PlacementResponse:
        layout = _layout_or_400(request.layout)
        return _placement_response(request.roster, request.formation, request.is_reference_side, layout)

    @app.post("/placements/upload", response_model=PlacementResponse)
    async def placements_upload(
        roster: UploadFile = File(...),
        formation: str | None = Form(None),
        is_reference_side: bool = Form(True),
        layout: str | None = Form(None),
        roster_mapping: str | None = Form(None),
    ) -> PlacementResponse:
        pitch = _layout_or_400(layout)
        mapping = _decode_mapping(roster_mapping)
        content = await roster.read()
        if not content:
            raise HTTPException(status_code=400, detail="roster file is empty")
        try:
            entries, payload_formation = _roster_from_upload(roster.filename or "", content, mapping)
        except (RosterIngestError, UnicodeDecodeError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _placement_response(entries, formation or payload_formation, is_reference_side, pitch)

    return app
