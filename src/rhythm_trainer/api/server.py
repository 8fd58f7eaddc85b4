"""HTTP API over a single trainer session."""

from __future__ import annotations

import tempfile
from pathlib import Path
from uuid import uuid4

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from rhythm_trainer.api.schemas import (
    BlockModel,
    NotationResponse,
    NotationSlot,
    PlaceRequest,
    PreviewRequest,
    SelectionModel,
    SelectRequest,
    SettingsModel,
    SettingsUpdate,
    SlotActionResponse,
    TimelineResponse,
)
from rhythm_trainer.audio.pattern_render import render_pattern_to_wav
from rhythm_trainer.notation.glyphs import GLYPH_IMAGES, glyph_image_url
from rhythm_trainer.timeline.models import BEAT_LABELS, Block
from rhythm_trainer.timeline.placement import NoOp, Placed, PlaceOutcome, Rejected, RemoveOutcome, Removed
from rhythm_trainer.trainer.session import TrainerSession


def create_app(session: TrainerSession | None = None) -> FastAPI:
    app = FastAPI(title="rhythm-trainer API", version="0.1.0")
    trainer = session or TrainerSession()
    preview_dir = Path(tempfile.gettempdir()) / "rhythm_trainer" / "preview"

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "rhythm-trainer API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon() -> Response:
        return Response(status_code=204)

    @app.get("/v1/timeline", response_model=TimelineResponse)
    def get_timeline() -> TimelineResponse:
        return _timeline_response(trainer)

    @app.post("/v1/timeline/selection", response_model=TimelineResponse)
    def select_block(payload: SelectRequest) -> TimelineResponse:
        try:
            trainer.select(payload.length, payload.color)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _timeline_response(trainer)

    @app.delete("/v1/timeline/selection", response_model=TimelineResponse)
    def deselect_block() -> TimelineResponse:
        trainer.deselect()
        return _timeline_response(trainer)

    @app.post("/v1/timeline/place", response_model=SlotActionResponse)
    def place_block(payload: PlaceRequest) -> SlotActionResponse:
        outcome = trainer.place(payload.start, payload.length, payload.color)
        if isinstance(outcome, Rejected):
            raise HTTPException(status_code=409, detail=outcome.reason.value)
        return _slot_action_response(trainer, outcome)

    @app.post("/v1/timeline/slots/{slot}/click", response_model=SlotActionResponse)
    def click_slot(slot: int) -> SlotActionResponse:
        try:
            outcome = trainer.click_slot(slot)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _slot_action_response(trainer, outcome)

    @app.delete("/v1/timeline/slots/{slot}", response_model=SlotActionResponse)
    def remove_block(slot: int) -> SlotActionResponse:
        return _slot_action_response(trainer, trainer.remove(slot))

    @app.post("/v1/timeline/clear", response_model=TimelineResponse)
    def clear_timeline() -> TimelineResponse:
        trainer.clear()
        return _timeline_response(trainer)

    @app.get("/v1/notation", response_model=NotationResponse)
    def get_notation() -> NotationResponse:
        return NotationResponse(
            slots=[
                NotationSlot(
                    slot=slot,
                    glyph=glyph.value,
                    image=GLYPH_IMAGES[glyph],
                    image_url=glyph_image_url(glyph),
                    label=BEAT_LABELS.get(slot),
                )
                for slot, glyph in enumerate(trainer.glyphs())
            ]
        )

    @app.get("/v1/settings", response_model=SettingsModel)
    def get_settings() -> SettingsModel:
        return _settings_model(trainer)

    @app.put("/v1/settings", response_model=SettingsModel)
    def update_settings(payload: SettingsUpdate) -> SettingsModel:
        try:
            trainer.update_settings(
                bpm=payload.bpm,
                sound_mode=payload.sound_mode,
                pitch_note=payload.pitch_note,
                master_volume=payload.master_volume,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _settings_model(trainer)

    @app.post("/v1/playback/preview")
    def preview_playback(payload: PreviewRequest | None = None) -> Response:
        loops = payload.loops if payload is not None else 1
        out = preview_dir / f"{uuid4()}.wav"
        try:
            render_pattern_to_wav(trainer.blocks(), trainer.settings, out, loops=loops)
            data = out.read_bytes()
        finally:
            out.unlink(missing_ok=True)
        return Response(content=data, media_type="audio/wav")

    return app


def _block_model(block: Block) -> BlockModel:
    return BlockModel(start=block.start, length=block.length, color=block.color.value)


def _timeline_response(trainer: TrainerSession) -> TimelineResponse:
    selection = trainer.selection
    return TimelineResponse(
        total_steps=trainer.store.total_steps,
        blocks=[_block_model(block) for block in trainer.blocks()],
        occupancy=list(trainer.store.occupancy()),
        glyphs=[glyph.value for glyph in trainer.glyphs()],
        slot_styles=trainer.slot_styles(),
        selection=SelectionModel(
            length=selection.pending_length,
            color=selection.pending_color.value if selection.pending_color is not None else None,
            active=selection.is_active,
        ),
    )


def _slot_action_response(trainer: TrainerSession, outcome: PlaceOutcome | RemoveOutcome | None) -> SlotActionResponse:
    timeline = _timeline_response(trainer)
    if isinstance(outcome, Placed):
        return SlotActionResponse(action="placed", block=_block_model(outcome.block), timeline=timeline)
    if isinstance(outcome, Rejected):
        return SlotActionResponse(action="rejected", reason=outcome.reason.value, timeline=timeline)
    if isinstance(outcome, Removed):
        return SlotActionResponse(action="removed", block=_block_model(outcome.block), timeline=timeline)
    if outcome is None or isinstance(outcome, NoOp):
        return SlotActionResponse(action="noop", timeline=timeline)
    raise TypeError(f"unexpected outcome {outcome!r}")


def _settings_model(trainer: TrainerSession) -> SettingsModel:
    settings = trainer.settings
    return SettingsModel(
        bpm=settings.bpm,
        sound_mode=settings.sound_mode,
        pitch_note=settings.pitch_note,
        master_volume=settings.master_volume,
        period_ms=settings.period_ms,
    )


app = create_app()
