"""Offline render of one measure for preview audition."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rhythm_trainer.audio.voices import (
    SAMPLE_RATE,
    TONE_DURATION_SEC,
    mix_into,
    render_pitch,
    render_tick,
    render_tone,
    write_wav_int16_mono,
)
from rhythm_trainer.playback.steps import plan_measure
from rhythm_trainer.timeline.models import TOTAL_STEPS, Block
from rhythm_trainer.trainer.settings import TrainerSettings


def render_pattern(
    blocks: Sequence[Block],
    settings: TrainerSettings,
    loops: int = 1,
    total_steps: int = TOTAL_STEPS,
) -> list[float]:
    if loops <= 0:
        raise ValueError("loops must be positive")
    step_samples = int(round(settings.period_ms / 1000.0 * SAMPLE_RATE))
    tail = int(TONE_DURATION_SEC * SAMPLE_RATE)
    buffer = [0.0] * (step_samples * total_steps * loops + tail)

    tick = render_tick()
    block_voice = render_tone() if settings.sound_mode == "drum" else render_pitch(settings.pitch_note)
    plans = plan_measure(blocks, total_steps)
    for loop in range(loops):
        for plan in plans:
            offset = (loop * total_steps + plan.step) * step_samples
            if plan.tick:
                mix_into(buffer, tick, offset)
            if plan.block is not None:
                mix_into(buffer, block_voice, offset)

    _normalize(buffer, peak=0.9)
    gain = settings.master_volume
    return [value * gain for value in buffer]


def render_pattern_to_wav(
    blocks: Sequence[Block],
    settings: TrainerSettings,
    output_path: str | Path,
    loops: int = 1,
) -> Path:
    return write_wav_int16_mono(output_path, render_pattern(blocks, settings, loops=loops))


def _normalize(buffer: list[float], peak: float = 0.9) -> None:
    max_abs = max((abs(value) for value in buffer), default=0.0)
    if max_abs <= peak:
        return
    gain = peak / max_abs
    for i, value in enumerate(buffer):
        buffer[i] = value * gain
