"""Timeline domain exports."""

from rhythm_trainer.timeline.models import (
    BEAT_LABELS,
    DEFAULT_PALETTE,
    TOTAL_STEPS,
    Block,
    BoundsError,
    Color,
    OverlapError,
    PaletteEntry,
    Selection,
    TimelineError,
)
from rhythm_trainer.timeline.placement import (
    NoOp,
    Placed,
    PlacementEngine,
    Rejected,
    RejectionReason,
    Removed,
)
from rhythm_trainer.timeline.store import TimelineStore

__all__ = [
    "BEAT_LABELS",
    "DEFAULT_PALETTE",
    "TOTAL_STEPS",
    "Block",
    "BoundsError",
    "Color",
    "NoOp",
    "OverlapError",
    "PaletteEntry",
    "Placed",
    "PlacementEngine",
    "Rejected",
    "RejectionReason",
    "Removed",
    "Selection",
    "TimelineError",
    "TimelineStore",
]
