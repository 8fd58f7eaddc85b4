"""Rendering surface contract and the adapter that paints notation onto it."""

from __future__ import annotations

from typing import Protocol, Sequence

from rhythm_trainer.notation.glyphs import Glyph
from rhythm_trainer.notation.renderer import render_glyphs, slot_styles
from rhythm_trainer.timeline.models import TOTAL_STEPS, Block, PaletteEntry


class RenderSurface(Protocol):
    def set_highlight(self, slot: int, on: bool) -> None: ...

    def set_glyph(self, slot: int, glyph: Glyph) -> None: ...

    def set_slot_style(self, slot: int, style: str | None) -> None: ...

    def set_palette_selection(self, entry: PaletteEntry | None) -> None: ...

    def trigger_rejection_shake(self) -> None: ...


def paint_notation(surface: RenderSurface, blocks: Sequence[Block], length: int = TOTAL_STEPS) -> list[Glyph]:
    glyphs = render_glyphs(blocks, length)
    styles = slot_styles(blocks, length)
    for slot in range(length):
        surface.set_slot_style(slot, styles[slot])
        surface.set_glyph(slot, glyphs[slot])
    return glyphs
