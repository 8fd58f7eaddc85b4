"""Timeline domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TOTAL_STEPS = 16
STEPS_PER_BEAT = 4
BEAT_STARTS: tuple[int, ...] = tuple(range(0, TOTAL_STEPS, STEPS_PER_BEAT))
SUPPORTED_LENGTHS: tuple[int, ...] = (1, 2, 4)

# Array indices where lengths 2 and 4 may not start.
OFFBEAT_SLOTS: frozenset[int] = frozenset(range(1, TOTAL_STEPS, 2))

BEAT_LABELS: dict[int, str] = {
    0: "1",
    2: "&",
    4: "2",
    6: "&",
    8: "3",
    10: "&",
    12: "4",
    14: "&",
}


class Color(str, Enum):
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"


class TimelineError(ValueError):
    """Raised when a block would break the timeline invariants."""


class BoundsError(TimelineError):
    pass


class OverlapError(TimelineError):
    pass


@dataclass(frozen=True, slots=True)
class Block:
    start: int
    length: int
    color: Color

    @property
    def end(self) -> int:
        """Exclusive end slot."""
        return self.start + self.length

    def slots(self) -> range:
        return range(self.start, self.end)

    def validate(self, total_steps: int = TOTAL_STEPS) -> None:
        if self.length not in SUPPORTED_LENGTHS:
            raise BoundsError(f"unsupported block length {self.length}")
        if self.start < 0 or self.end > total_steps:
            raise BoundsError(f"block [{self.start}, {self.end}) exceeds timeline of {total_steps} slots")


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    length: int
    color: Color


DEFAULT_PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(length=4, color=Color.GREEN),
    PaletteEntry(length=2, color=Color.ORANGE),
    PaletteEntry(length=1, color=Color.PURPLE),
)


@dataclass(slots=True)
class Selection:
    pending_length: int | None = None
    pending_color: Color | None = None

    @property
    def is_active(self) -> bool:
        return self.pending_length is not None and self.pending_color is not None

    def select(self, length: int, color: Color | str) -> None:
        if length not in SUPPORTED_LENGTHS:
            raise ValueError(f"unsupported block length {length}")
        pending_color = Color(color)
        self.pending_length = length
        self.pending_color = pending_color

    def clear(self) -> None:
        self.pending_length = None
        self.pending_color = None
