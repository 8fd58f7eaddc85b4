"""Sixteen-slot timeline store with block invariants."""

from __future__ import annotations

from rhythm_trainer.timeline.models import TOTAL_STEPS, Block, Color, OverlapError


class TimelineStore:
    def __init__(self, total_steps: int = TOTAL_STEPS) -> None:
        if total_steps <= 0:
            raise ValueError("total_steps must be positive")
        self.total_steps = total_steps
        self._blocks: dict[int, Block] = {}
        # slot -> covering block, kept in sync with _blocks for O(1) queries.
        self._coverage: list[Block | None] = [None] * total_steps

    def add_block(self, block: Block) -> Block:
        block.validate(self.total_steps)
        for slot in block.slots():
            existing = self._coverage[slot]
            if existing is not None:
                raise OverlapError(
                    f"block [{block.start}, {block.end}) overlaps block [{existing.start}, {existing.end})"
                )
        self._blocks[block.start] = block
        for slot in block.slots():
            self._coverage[slot] = block
        return block

    def remove_block_at(self, slot: int) -> Block | None:
        block = self.block_covering(slot)
        if block is None:
            return None
        del self._blocks[block.start]
        for covered in block.slots():
            self._coverage[covered] = None
        return block

    def clear(self) -> None:
        self._blocks.clear()
        self._coverage = [None] * self.total_steps

    def block_covering(self, slot: int) -> Block | None:
        if not (0 <= slot < self.total_steps):
            return None
        return self._coverage[slot]

    def block_starting_at(self, slot: int) -> Block | None:
        return self._blocks.get(slot)

    def is_occupied(self, slot: int) -> bool:
        return self.block_covering(slot) is not None

    def color_at(self, slot: int) -> Color | None:
        block = self.block_covering(slot)
        return block.color if block is not None else None

    def occupancy(self) -> tuple[bool, ...]:
        return tuple(block is not None for block in self._coverage)

    def blocks(self) -> list[Block]:
        return [self._blocks[start] for start in sorted(self._blocks)]

    def __len__(self) -> int:
        return len(self._blocks)
