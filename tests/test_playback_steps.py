import pytest

from rhythm_trainer.notation.grouping import RestWindow
from rhythm_trainer.playback.steps import plan_measure, plan_step
from rhythm_trainer.timeline.models import Block, Color


def test_beat_boundaries_tick_every_four_steps() -> None:
    plans = plan_measure([])
    assert [plan.step for plan in plans if plan.tick] == [0, 4, 8, 12]


def test_block_start_highlights_whole_block() -> None:
    block = Block(start=8, length=4, color=Color.GREEN)
    plan = plan_step([block], 8)
    assert plan.tick
    assert plan.block == block
    assert plan.highlight == (8, 9, 10, 11)
    assert plan.rest is None


def test_empty_step_windows() -> None:
    blocks = [Block(start=3, length=1, color=Color.PURPLE)]
    assert plan_step(blocks, 0).rest is RestWindow.PAIR
    assert plan_step(blocks, 0).highlight == (0, 1)
    assert plan_step(blocks, 2).rest is RestWindow.SINGLE
    assert plan_step(blocks, 2).highlight == (2,)
    assert plan_step(blocks, 5).rest is RestWindow.GROUP
    assert plan_step(blocks, 5).highlight == (4, 5, 6, 7)


def test_mid_block_step_has_no_actions() -> None:
    plan = plan_step([Block(start=0, length=2, color=Color.ORANGE)], 1)
    assert plan.block is None
    assert plan.highlight == ()
    assert not plan.tick


def test_step_outside_measure_is_rejected() -> None:
    with pytest.raises(ValueError):
        plan_step([], 16)
