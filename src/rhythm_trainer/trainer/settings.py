"""Trainer configuration: tempo, sound mode, pitch and master volume."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Literal

from rhythm_trainer.audio.notes import is_valid_note_name
from rhythm_trainer.timeline.models import STEPS_PER_BEAT

SoundMode = Literal["drum", "pitch"]
SUPPORTED_SOUND_MODES: tuple[SoundMode, ...] = ("drum", "pitch")

MIN_BPM = 30
MAX_BPM = 300
DEFAULT_BPM = 60
DEFAULT_PITCH = "A2"


def clamp_bpm(bpm: int | float) -> int:
    return int(min(max(int(bpm), MIN_BPM), MAX_BPM))


def clamp_volume(volume: float) -> float:
    value = float(volume)
    if math.isnan(value):
        return 1.0
    return min(max(value, 0.0), 1.0)


def step_period_ms(bpm: int | float) -> float:
    """Sixteenth-note tick period in milliseconds."""
    return 60000.0 / clamp_bpm(bpm) / STEPS_PER_BEAT


def normalize_sound_mode(value: str | None) -> SoundMode:
    mode = (value or "drum").strip().lower()
    if mode in SUPPORTED_SOUND_MODES:
        return mode  # type: ignore[return-value]
    raise ValueError(f"Unsupported sound mode '{value}'")


@dataclass(slots=True)
class TrainerSettings:
    bpm: int = DEFAULT_BPM
    sound_mode: SoundMode = "drum"
    pitch_note: str = DEFAULT_PITCH
    master_volume: float = 1.0

    def __post_init__(self) -> None:
        self.bpm = clamp_bpm(self.bpm)
        self.sound_mode = normalize_sound_mode(self.sound_mode)
        self.master_volume = clamp_volume(self.master_volume)

    @property
    def period_ms(self) -> float:
        return step_period_ms(self.bpm)

    @staticmethod
    def from_env() -> TrainerSettings:
        bpm_raw = os.getenv("RHYTHM_TRAINER_BPM", str(DEFAULT_BPM)).strip()
        volume_raw = os.getenv("RHYTHM_TRAINER_VOLUME", "1.0").strip()
        mode_raw = os.getenv("RHYTHM_TRAINER_SOUND_MODE", "drum").strip()
        pitch = os.getenv("RHYTHM_TRAINER_PITCH", DEFAULT_PITCH).strip()
        try:
            bpm = int(bpm_raw)
        except ValueError:
            bpm = DEFAULT_BPM
        try:
            volume = float(volume_raw)
        except ValueError:
            volume = 1.0
        try:
            mode = normalize_sound_mode(mode_raw)
        except ValueError:
            mode = "drum"
        if not is_valid_note_name(pitch):
            pitch = DEFAULT_PITCH
        return TrainerSettings(bpm=bpm, sound_mode=mode, pitch_note=pitch, master_volume=volume)
