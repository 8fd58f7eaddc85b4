"""Notation glyph kinds and their image set."""

from __future__ import annotations

from enum import Enum

from rhythm_trainer.timeline.models import Color


class Glyph(str, Enum):
    WHOLE = "whole"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    GROUP_REST = "group_rest"
    PAIR_REST = "pair_rest"
    SINGLE_REST = "single_rest"
    BLANK = "blank"


# Block length -> note glyph.
NOTE_GLYPHS: dict[int, Glyph] = {
    4: Glyph.WHOLE,
    2: Glyph.QUARTER,
    1: Glyph.EIGHTH,
}

IMAGE_BASE_URL = "https://raw.githubusercontent.com/VisualMusicalMinds/Cartoon_Notation/refs/heads/main/"

GLYPH_IMAGES: dict[Glyph, str] = {
    Glyph.WHOLE: "Cartoon Rhythm0002.png",
    Glyph.GROUP_REST: "Cartoon Rhythm0003.png",
    Glyph.QUARTER: "Cartoon Rhythm0004.png",
    Glyph.PAIR_REST: "Cartoon Rhythm0005.png",
    Glyph.EIGHTH: "Cartoon Rhythm0006.png",
    Glyph.SINGLE_REST: "Cartoon Rhythm0007.png",
    Glyph.BLANK: "Cartoon Rhythm0008.png",
}

SLOT_STYLE_COLORS: dict[Color, tuple[str, str]] = {
    Color.GREEN: ("green-primary", "green-secondary"),
    Color.ORANGE: ("orange-primary", "orange-secondary"),
    Color.PURPLE: ("purple", "purple"),
}


def glyph_image_url(glyph: Glyph) -> str:
    return IMAGE_BASE_URL + GLYPH_IMAGES[glyph].replace(" ", "%20")
