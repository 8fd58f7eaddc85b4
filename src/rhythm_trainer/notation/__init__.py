"""Notation rendering exports."""

from rhythm_trainer.notation.glyphs import GLYPH_IMAGES, Glyph, glyph_image_url
from rhythm_trainer.notation.grouping import RestWindow, empty_slot_window
from rhythm_trainer.notation.renderer import occupancy_of, render_glyphs, slot_styles

__all__ = [
    "GLYPH_IMAGES",
    "Glyph",
    "RestWindow",
    "empty_slot_window",
    "glyph_image_url",
    "occupancy_of",
    "render_glyphs",
    "slot_styles",
]
