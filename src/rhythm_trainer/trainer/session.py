"""Trainer session: timeline, selection and settings for one user."""

from __future__ import annotations

import logging

from rhythm_trainer.audio.notes import is_valid_note_name
from rhythm_trainer.notation.glyphs import Glyph
from rhythm_trainer.notation.renderer import render_glyphs, slot_styles
from rhythm_trainer.timeline.models import Block, Color, PaletteEntry, Selection
from rhythm_trainer.timeline.placement import NoOp, PlaceOutcome, PlacementEngine, RemoveOutcome
from rhythm_trainer.timeline.store import TimelineStore
from rhythm_trainer.trainer.settings import (
    SoundMode,
    TrainerSettings,
    clamp_bpm,
    clamp_volume,
    normalize_sound_mode,
)

logger = logging.getLogger(__name__)


class TrainerSession:
    def __init__(self, settings: TrainerSettings | None = None, store: TimelineStore | None = None) -> None:
        self.settings = settings or TrainerSettings()
        self.store = store or TimelineStore()
        self.selection = Selection()
        self.engine = PlacementEngine(self.store, self.selection)

    def select(self, length: int, color: Color | str) -> PaletteEntry:
        self.selection.select(length, color)
        return PaletteEntry(length=length, color=Color(color))

    def select_entry(self, entry: PaletteEntry) -> PaletteEntry:
        return self.select(entry.length, entry.color)

    def deselect(self) -> None:
        self.selection.clear()

    def place(self, start: int, length: int, color: Color | str) -> PlaceOutcome | None:
        return self.engine.attempt_place(start, length, color)

    def click_slot(self, slot: int) -> PlaceOutcome | RemoveOutcome | None:
        """Place the selected block at ``slot``, or remove the block there when nothing is selected."""
        if not (0 <= slot < self.store.total_steps):
            raise ValueError(f"slot {slot} outside [0, {self.store.total_steps})")
        if self.selection.is_active:
            return self.engine.attempt_place_selected(slot)
        return self.engine.attempt_remove(slot)

    def remove(self, slot: int) -> RemoveOutcome:
        if not (0 <= slot < self.store.total_steps):
            return NoOp(slot=slot)
        return self.engine.attempt_remove(slot)

    def clear(self) -> None:
        self.store.clear()
        logger.debug("timeline cleared")

    def blocks(self) -> list[Block]:
        return self.store.blocks()

    def glyphs(self) -> list[Glyph]:
        return render_glyphs(self.store.blocks(), self.store.total_steps)

    def slot_styles(self) -> list[str | None]:
        return slot_styles(self.store.blocks(), self.store.total_steps)

    def update_settings(
        self,
        bpm: int | None = None,
        sound_mode: SoundMode | str | None = None,
        pitch_note: str | None = None,
        master_volume: float | None = None,
    ) -> TrainerSettings:
        if bpm is not None:
            self.settings.bpm = clamp_bpm(bpm)
        if sound_mode is not None:
            self.settings.sound_mode = normalize_sound_mode(sound_mode)
        if pitch_note is not None:
            if not is_valid_note_name(pitch_note):
                raise ValueError(f"Unsupported pitch note '{pitch_note}'")
            self.settings.pitch_note = pitch_note
        if master_volume is not None:
            self.settings.master_volume = clamp_volume(master_volume)
        return self.settings
