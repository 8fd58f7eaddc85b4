"""Input adapter: routes palette, slot and outside clicks to the session."""

from __future__ import annotations

from rhythm_trainer.notation.glyphs import Glyph
from rhythm_trainer.notation.surface import RenderSurface, paint_notation
from rhythm_trainer.timeline.models import PaletteEntry
from rhythm_trainer.timeline.placement import Placed, PlaceOutcome, Rejected, RemoveOutcome, Removed
from rhythm_trainer.trainer.session import TrainerSession


class InputAdapter:
    def __init__(self, session: TrainerSession, surface: RenderSurface) -> None:
        self._session = session
        self._surface = surface

    @property
    def session(self) -> TrainerSession:
        return self._session

    def select_palette_entry(self, entry: PaletteEntry) -> None:
        self._session.select_entry(entry)
        self._surface.set_palette_selection(entry)

    def deselect(self) -> None:
        self._session.deselect()
        self._surface.set_palette_selection(None)

    def click_slot(self, slot: int) -> PlaceOutcome | RemoveOutcome | None:
        outcome = self._session.click_slot(slot)
        if isinstance(outcome, Placed):
            self._surface.set_palette_selection(None)
            self.refresh()
        elif isinstance(outcome, Rejected):
            self._surface.trigger_rejection_shake()
        elif isinstance(outcome, Removed):
            self.refresh()
        return outcome

    def click_outside(self) -> None:
        # Drops stray slot styling left on empty slots.
        self.refresh()

    def clear(self) -> None:
        self._session.clear()
        self.refresh()

    def refresh(self) -> list[Glyph]:
        return paint_notation(self._surface, self._session.blocks(), self._session.store.total_steps)
