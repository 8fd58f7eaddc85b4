"""FastAPI request/response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

BlockLength = Literal[1, 2, 4]
BlockColor = Literal["green", "orange", "purple"]


class BlockModel(BaseModel):
    start: int
    length: int
    color: str


class SelectionModel(BaseModel):
    length: int | None = None
    color: str | None = None
    active: bool = False


class TimelineResponse(BaseModel):
    total_steps: int
    blocks: list[BlockModel]
    occupancy: list[bool]
    glyphs: list[str]
    slot_styles: list[str | None]
    selection: SelectionModel


class SelectRequest(BaseModel):
    length: BlockLength
    color: BlockColor


class PlaceRequest(BaseModel):
    start: int = Field(ge=0, le=15)
    length: BlockLength
    color: BlockColor


class SlotActionResponse(BaseModel):
    action: Literal["placed", "rejected", "removed", "noop"]
    reason: str | None = None
    block: BlockModel | None = None
    timeline: TimelineResponse


class NotationSlot(BaseModel):
    slot: int
    glyph: str
    image: str
    image_url: str
    label: str | None = None


class NotationResponse(BaseModel):
    slots: list[NotationSlot]


class SettingsModel(BaseModel):
    bpm: int
    sound_mode: Literal["drum", "pitch"]
    pitch_note: str
    master_volume: float
    period_ms: float


class SettingsUpdate(BaseModel):
    # Out-of-range tempo and volume are clamped, not rejected.
    bpm: int | None = None
    sound_mode: Literal["drum", "pitch"] | None = None
    pitch_note: str | None = Field(default=None, pattern=r"^[A-G]#?\d$")
    master_volume: float | None = Field(default=None, allow_inf_nan=False)


class PreviewRequest(BaseModel):
    loops: int = Field(default=1, ge=1, le=8)
