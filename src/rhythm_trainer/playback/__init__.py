"""Playback scheduling exports."""

from rhythm_trainer.playback.clock import Clock, TimerHandle
from rhythm_trainer.playback.scheduler import PlaybackScheduler
from rhythm_trainer.playback.steps import StepPlan, plan_measure, plan_step

__all__ = [
    "Clock",
    "PlaybackScheduler",
    "StepPlan",
    "TimerHandle",
    "plan_measure",
    "plan_step",
]
