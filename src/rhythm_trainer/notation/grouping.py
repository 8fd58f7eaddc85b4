"""Beat-group and pair windows shared by notation and playback."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from rhythm_trainer.timeline.models import STEPS_PER_BEAT


class RestWindow(str, Enum):
    GROUP = "group"
    PAIR = "pair"
    SINGLE = "single"


def group_start(slot: int) -> int:
    return (slot // STEPS_PER_BEAT) * STEPS_PER_BEAT


def pair_start(slot: int) -> int:
    return slot if slot % 2 == 0 else slot - 1


def group_slots(slot: int, total_steps: int) -> range:
    start = group_start(slot)
    return range(start, min(start + STEPS_PER_BEAT, total_steps))


def pair_slots(slot: int, total_steps: int) -> range:
    start = pair_start(slot)
    return range(start, min(start + 2, total_steps))


def all_empty(occupancy: Sequence[bool], slots: range) -> bool:
    return not any(occupancy[slot] for slot in slots)


def empty_slot_window(occupancy: Sequence[bool], slot: int) -> tuple[RestWindow, range]:
    """Pick the slots that sound and light together with an empty slot.

    The whole beat-group wins when all four slots are empty, then the pair
    when both are empty and the slot is even, otherwise the slot alone.
    """
    total = len(occupancy)
    group = group_slots(slot, total)
    if all_empty(occupancy, group):
        return RestWindow.GROUP, group
    pair = pair_slots(slot, total)
    if slot % 2 == 0 and all_empty(occupancy, pair):
        return RestWindow.PAIR, pair
    return RestWindow.SINGLE, range(slot, slot + 1)
