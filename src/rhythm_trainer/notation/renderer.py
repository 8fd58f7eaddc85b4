"""Derive per-slot notation glyphs from placed blocks."""

from __future__ import annotations

from typing import Iterable, Sequence

from rhythm_trainer.notation.glyphs import NOTE_GLYPHS, SLOT_STYLE_COLORS, Glyph
from rhythm_trainer.notation.grouping import all_empty, group_slots, group_start, pair_slots
from rhythm_trainer.timeline.models import TOTAL_STEPS, Block


def occupancy_of(blocks: Iterable[Block], length: int = TOTAL_STEPS) -> list[bool]:
    occupied = [False] * length
    for block in blocks:
        for slot in block.slots():
            if 0 <= slot < length:
                occupied[slot] = True
    return occupied


def render_glyphs(blocks: Sequence[Block], length: int = TOTAL_STEPS) -> list[Glyph]:
    """Return the glyph shown at each of the ``length`` slots.

    A single left-to-right pass: a block start emits the note glyph for its
    length and suppresses the slots it spans; an empty slot emits a group rest
    when its whole beat-group is empty and it is the group start, a pair rest
    when its even-aligned pair is empty and it is even, and a single rest when
    only its pair partner is occupied. Suppressed and unmatched slots are
    ``Glyph.BLANK``.
    """
    starts = {block.start: block for block in blocks}
    occupied = occupancy_of(blocks, length)
    glyphs = [Glyph.BLANK] * length

    i = 0
    while i < length:
        skip = 0
        block = starts.get(i)
        if block is not None:
            glyphs[i] = NOTE_GLYPHS[block.length]
            skip = block.length - 1
        elif not occupied[i]:
            if i == group_start(i) and all_empty(occupied, group_slots(i, length)):
                glyphs[i] = Glyph.GROUP_REST
                skip = 3
            elif i % 2 == 0 and all_empty(occupied, pair_slots(i, length)):
                glyphs[i] = Glyph.PAIR_REST
                skip = 1
            elif not all_empty(occupied, pair_slots(i, length)):
                glyphs[i] = Glyph.SINGLE_REST
        i += skip + 1
    return glyphs


def slot_styles(blocks: Sequence[Block], length: int = TOTAL_STEPS) -> list[str | None]:
    """Per-slot color style, primary on the block start and secondary after."""
    styles: list[str | None] = [None] * length
    for block in blocks:
        primary, secondary = SLOT_STYLE_COLORS[block.color]
        for slot in block.slots():
            if 0 <= slot < length:
                styles[slot] = primary if slot == block.start else secondary
    return styles
