"""Trainer session, input adapter and settings exports."""

from rhythm_trainer.trainer.input import InputAdapter
from rhythm_trainer.trainer.session import TrainerSession
from rhythm_trainer.trainer.settings import SoundMode, TrainerSettings, clamp_bpm, step_period_ms

__all__ = [
    "InputAdapter",
    "SoundMode",
    "TrainerSession",
    "TrainerSettings",
    "clamp_bpm",
    "step_period_ms",
]
