from rhythm_trainer.notation.glyphs import Glyph
from rhythm_trainer.timeline.models import DEFAULT_PALETTE, Color, PaletteEntry
from rhythm_trainer.timeline.placement import NoOp, Placed, Rejected, Removed
from rhythm_trainer.trainer.input import InputAdapter
from rhythm_trainer.trainer.session import TrainerSession

GREEN = PaletteEntry(length=4, color=Color.GREEN)
PURPLE = PaletteEntry(length=1, color=Color.PURPLE)


class _RecordingSurface:
    def __init__(self) -> None:
        self.glyphs: dict[int, Glyph] = {}
        self.styles: dict[int, str | None] = {}
        self.palette: PaletteEntry | None = None
        self.shakes = 0

    def set_highlight(self, slot: int, on: bool) -> None:
        pass

    def set_glyph(self, slot: int, glyph: Glyph) -> None:
        self.glyphs[slot] = glyph

    def set_slot_style(self, slot: int, style: str | None) -> None:
        self.styles[slot] = style

    def set_palette_selection(self, entry: PaletteEntry | None) -> None:
        self.palette = entry

    def trigger_rejection_shake(self) -> None:
        self.shakes += 1


def _adapter() -> tuple[InputAdapter, _RecordingSurface]:
    surface = _RecordingSurface()
    adapter = InputAdapter(TrainerSession(), surface)
    adapter.refresh()
    return adapter, surface


def test_default_palette_matches_block_kinds() -> None:
    assert DEFAULT_PALETTE == (GREEN, PaletteEntry(length=2, color=Color.ORANGE), PURPLE)


def test_select_then_click_places_and_repaints() -> None:
    adapter, surface = _adapter()
    assert surface.glyphs[0] is Glyph.GROUP_REST

    adapter.select_palette_entry(GREEN)
    assert surface.palette == GREEN

    outcome = adapter.click_slot(0)

    assert isinstance(outcome, Placed)
    assert surface.palette is None
    assert surface.glyphs[0] is Glyph.WHOLE
    assert surface.styles[0] == "green-primary"
    assert surface.styles[3] == "green-secondary"
    assert not adapter.session.selection.is_active


def test_rejected_click_shakes_and_keeps_selection() -> None:
    adapter, surface = _adapter()
    adapter.select_palette_entry(GREEN)

    outcome = adapter.click_slot(1)

    assert isinstance(outcome, Rejected)
    assert surface.shakes == 1
    assert surface.palette == GREEN
    assert adapter.session.selection.is_active
    assert not adapter.session.store.is_occupied(1)


def test_click_without_selection_removes_block() -> None:
    adapter, surface = _adapter()
    adapter.select_palette_entry(PURPLE)
    adapter.click_slot(5)
    assert surface.glyphs[5] is Glyph.EIGHTH

    outcome = adapter.click_slot(5)

    assert isinstance(outcome, Removed)
    assert surface.glyphs[4] is Glyph.GROUP_REST
    assert surface.styles[5] is None
    assert isinstance(adapter.click_slot(9), NoOp)


def test_deselect_and_clear() -> None:
    adapter, surface = _adapter()
    adapter.select_palette_entry(PURPLE)
    adapter.click_slot(0)
    adapter.select_palette_entry(GREEN)

    adapter.deselect()
    assert surface.palette is None
    assert not adapter.session.selection.is_active

    adapter.clear()
    assert adapter.session.blocks() == []
    assert [surface.glyphs[i] for i in (0, 4, 8, 12)] == [Glyph.GROUP_REST] * 4


def test_click_outside_repaints_styles() -> None:
    adapter, surface = _adapter()
    surface.styles[2] = "orange-primary"

    adapter.click_outside()

    assert surface.styles[2] is None
