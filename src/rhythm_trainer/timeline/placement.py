"""Placement rules for committing and removing blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from rhythm_trainer.timeline.models import OFFBEAT_SLOTS, SUPPORTED_LENGTHS, Block, Color, Selection
from rhythm_trainer.timeline.store import TimelineStore

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    OFFBEAT_VIOLATION = "offbeat_violation"
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"


@dataclass(frozen=True, slots=True)
class Placed:
    block: Block


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: RejectionReason
    start: int
    length: int


@dataclass(frozen=True, slots=True)
class Removed:
    block: Block


@dataclass(frozen=True, slots=True)
class NoOp:
    slot: int


PlaceOutcome = Placed | Rejected
RemoveOutcome = Removed | NoOp


class PlacementEngine:
    """Validates candidate placements against the store and commits them.

    Validation runs in a fixed order and the first failing rule decides the
    rejection reason: off-beat start for lengths 2 and 4, then bounds, then
    overlap. Rejections never mutate the store or the selection.
    """

    def __init__(self, store: TimelineStore, selection: Selection | None = None) -> None:
        self._store = store
        self._selection = selection or Selection()

    @property
    def store(self) -> TimelineStore:
        return self._store

    @property
    def selection(self) -> Selection:
        return self._selection

    def check(self, start: int, length: int) -> RejectionReason | None:
        if length not in SUPPORTED_LENGTHS:
            raise ValueError(f"unsupported block length {length}")
        if length in (2, 4) and start in OFFBEAT_SLOTS:
            return RejectionReason.OFFBEAT_VIOLATION
        if start < 0 or start + length > self._store.total_steps:
            return RejectionReason.OUT_OF_BOUNDS
        if any(self._store.is_occupied(slot) for slot in range(start, start + length)):
            return RejectionReason.OVERLAP
        return None

    def attempt_place(self, start: int, length: int | None, color: Color | str | None) -> PlaceOutcome | None:
        if length is None or color is None:
            return None
        reason = self.check(start, length)
        if reason is not None:
            logger.debug("placement rejected: start=%d length=%d reason=%s", start, length, reason.value)
            return Rejected(reason=reason, start=start, length=length)

        block = self._store.add_block(Block(start=start, length=length, color=Color(color)))
        self._selection.clear()
        logger.debug("placed %s block at [%d, %d)", block.color.value, block.start, block.end)
        return Placed(block=block)

    def attempt_place_selected(self, start: int) -> PlaceOutcome | None:
        return self.attempt_place(start, self._selection.pending_length, self._selection.pending_color)

    def attempt_remove(self, slot: int) -> RemoveOutcome:
        if self._selection.is_active:
            return NoOp(slot=slot)
        block = self._store.remove_block_at(slot)
        if block is None:
            return NoOp(slot=slot)
        logger.debug("removed block at [%d, %d)", block.start, block.end)
        return Removed(block=block)
