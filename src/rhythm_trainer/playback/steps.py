"""Per-step playback decisions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rhythm_trainer.notation.grouping import RestWindow, empty_slot_window
from rhythm_trainer.notation.renderer import occupancy_of
from rhythm_trainer.timeline.models import BEAT_STARTS, TOTAL_STEPS, Block


@dataclass(frozen=True, slots=True)
class StepPlan:
    step: int
    tick: bool
    block: Block | None
    highlight: tuple[int, ...]
    rest: RestWindow | None = None


def plan_step(blocks: Sequence[Block], step: int, total_steps: int = TOTAL_STEPS) -> StepPlan:
    """Decide what sounds and what lights up at ``step``.

    The beat tick is independent of the rest. A block starting here lights its
    whole span; an empty slot lights its group, pair or itself; a slot in the
    middle of a block does nothing.
    """
    if not (0 <= step < total_steps):
        raise ValueError(f"step {step} outside [0, {total_steps})")
    tick = step in BEAT_STARTS
    for block in blocks:
        if block.start == step:
            return StepPlan(step=step, tick=tick, block=block, highlight=tuple(block.slots()))

    occupancy = occupancy_of(blocks, total_steps)
    if not occupancy[step]:
        window, slots = empty_slot_window(occupancy, step)
        return StepPlan(step=step, tick=tick, block=None, highlight=tuple(slots), rest=window)
    return StepPlan(step=step, tick=tick, block=None, highlight=())


def plan_measure(blocks: Sequence[Block], total_steps: int = TOTAL_STEPS) -> list[StepPlan]:
    return [plan_step(blocks, step, total_steps) for step in range(total_steps)]
