from rhythm_trainer.notation.glyphs import GLYPH_IMAGES, Glyph, glyph_image_url
from rhythm_trainer.notation.renderer import render_glyphs, slot_styles
from rhythm_trainer.timeline.models import Block, Color

B = Glyph.BLANK
EMPTY_BEAT = [Glyph.GROUP_REST, B, B, B]


def test_empty_timeline_renders_four_group_rests() -> None:
    glyphs = render_glyphs([])
    assert glyphs == EMPTY_BEAT * 4
    assert [i for i, glyph in enumerate(glyphs) if glyph is Glyph.GROUP_REST] == [0, 4, 8, 12]


def test_block_glyph_follows_length_and_suppresses_covered_slots() -> None:
    glyphs = render_glyphs([Block(start=0, length=4, color=Color.GREEN)])
    assert glyphs == [Glyph.WHOLE, B, B, B] + EMPTY_BEAT * 3


def test_single_rest_when_pair_partner_is_occupied() -> None:
    glyphs = render_glyphs([Block(start=1, length=1, color=Color.PURPLE)])
    assert glyphs[:4] == [Glyph.SINGLE_REST, Glyph.EIGHTH, Glyph.PAIR_REST, B]

    glyphs = render_glyphs([Block(start=0, length=1, color=Color.PURPLE)])
    assert glyphs[:4] == [Glyph.EIGHTH, Glyph.SINGLE_REST, Glyph.PAIR_REST, B]


def test_pair_rest_before_a_quarter_block() -> None:
    glyphs = render_glyphs([Block(start=2, length=2, color=Color.ORANGE)])
    assert glyphs == [Glyph.PAIR_REST, B, Glyph.QUARTER, B] + EMPTY_BEAT * 3


def test_block_spanning_two_beat_groups() -> None:
    glyphs = render_glyphs([Block(start=2, length=4, color=Color.GREEN)])
    assert glyphs[:8] == [Glyph.PAIR_REST, B, Glyph.WHOLE, B, B, B, Glyph.PAIR_REST, B]
    assert glyphs[8:] == EMPTY_BEAT * 2


def test_render_is_deterministic_and_order_independent() -> None:
    blocks = [
        Block(start=0, length=4, color=Color.GREEN),
        Block(start=6, length=2, color=Color.ORANGE),
        Block(start=9, length=1, color=Color.PURPLE),
        Block(start=15, length=1, color=Color.PURPLE),
    ]
    first = render_glyphs(blocks)
    assert render_glyphs(blocks) == first
    assert render_glyphs(list(reversed(blocks))) == first
    assert first == [
        Glyph.WHOLE, B, B, B,
        Glyph.PAIR_REST, B, Glyph.QUARTER, B,
        Glyph.SINGLE_REST, Glyph.EIGHTH, Glyph.PAIR_REST, B,
        Glyph.PAIR_REST, B, Glyph.SINGLE_REST, Glyph.EIGHTH,
    ]


def test_slot_styles_mark_primary_and_secondary_positions() -> None:
    styles = slot_styles(
        [
            Block(start=0, length=4, color=Color.GREEN),
            Block(start=4, length=2, color=Color.ORANGE),
            Block(start=6, length=1, color=Color.PURPLE),
        ]
    )
    assert styles[:8] == [
        "green-primary",
        "green-secondary",
        "green-secondary",
        "green-secondary",
        "orange-primary",
        "orange-secondary",
        "purple",
        None,
    ]


def test_every_glyph_has_an_image() -> None:
    assert set(GLYPH_IMAGES) == set(Glyph)
    assert glyph_image_url(Glyph.BLANK).endswith("Cartoon%20Rhythm0008.png")
