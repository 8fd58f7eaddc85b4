"""Offline synthesis of the tick, drum tone and pitched tone voices."""

from __future__ import annotations

import math
import random
import wave
from pathlib import Path

from rhythm_trainer.audio.notes import note_to_frequency

SAMPLE_RATE = 48_000

TICK_SAMPLES = 4096
TICK_DURATION_SEC = 0.05
TICK_HIGHPASS_HZ = 800.0
TICK_GAIN = 0.2

TONE_DURATION_SEC = 0.13
TONE_START_HZ = 110.0
TONE_END_HZ = 40.0
CLICK_DURATION_SEC = 0.02
CLICK_GAIN = 0.25

ENVELOPE_FLOOR = 0.01


def _exp_ramp(start: float, end: float, t: float, duration: float) -> float:
    if t >= duration:
        return end
    return start * ((end / start) ** (t / duration))


def _noise(count: int, seed: int) -> list[float]:
    rng = random.Random(seed)
    return [rng.random() * 2.0 - 1.0 for _ in range(count)]


def _highpass(samples: list[float], cutoff_hz: float) -> list[float]:
    rc = 1.0 / (2.0 * math.pi * cutoff_hz)
    dt = 1.0 / SAMPLE_RATE
    alpha = rc / (rc + dt)
    out: list[float] = []
    prev_in = 0.0
    prev_out = 0.0
    for value in samples:
        prev_out = alpha * (prev_out + value - prev_in)
        prev_in = value
        out.append(prev_out)
    return out


def render_tick(seed: int = 1) -> list[float]:
    """High-passed noise burst with a fast exponential decay."""
    length = min(TICK_SAMPLES, int(TICK_DURATION_SEC * SAMPLE_RATE))
    filtered = _highpass(_noise(TICK_SAMPLES, seed), TICK_HIGHPASS_HZ)
    buffer: list[float] = []
    for i in range(length):
        t = i / SAMPLE_RATE
        buffer.append(filtered[i] * _exp_ramp(TICK_GAIN, ENVELOPE_FLOOR, t, TICK_DURATION_SEC))
    return buffer


def render_tone(seed: int = 2) -> list[float]:
    """Low sine sweep plus a short noise click, the drum-mode block sound."""
    length = int(TONE_DURATION_SEC * SAMPLE_RATE)
    sweep_sec = TONE_DURATION_SEC * 0.8
    buffer = [0.0] * length
    phase = 0.0
    for i in range(length):
        t = i / SAMPLE_RATE
        freq = _exp_ramp(TONE_START_HZ, TONE_END_HZ, t, sweep_sec)
        phase += 2.0 * math.pi * freq / SAMPLE_RATE
        buffer[i] = math.sin(phase) * _exp_ramp(1.0, ENVELOPE_FLOOR, t, TONE_DURATION_SEC)

    click_len = int(CLICK_DURATION_SEC * SAMPLE_RATE)
    for i, value in enumerate(_noise(click_len, seed)):
        buffer[i] += value * (1.0 - i / click_len) * CLICK_GAIN
    return buffer


def render_pitch(note: str) -> list[float]:
    """Triangle wave at the note's frequency with an exponential decay."""
    freq = note_to_frequency(note)
    length = int(TONE_DURATION_SEC * SAMPLE_RATE)
    buffer: list[float] = []
    for i in range(length):
        t = i / SAMPLE_RATE
        cycle = (freq * t) % 1.0
        triangle = 4.0 * abs(cycle - 0.5) - 1.0
        buffer.append(triangle * _exp_ramp(1.0, ENVELOPE_FLOOR, t, TONE_DURATION_SEC))
    return buffer


def mix_into(buffer: list[float], voice: list[float], offset: int, gain: float = 1.0) -> None:
    for i, value in enumerate(voice):
        idx = offset + i
        if idx >= len(buffer):
            break
        buffer[idx] += value * gain


def write_wav_int16_mono(path: str | Path, buffer: list[float]) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(out), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(SAMPLE_RATE)
        frames = bytearray()
        for sample in buffer:
            clipped = min(max(sample, -1.0), 1.0)
            value = int(round(clipped * 32767.0))
            frames.extend(value.to_bytes(2, "little", signed=True))
        wav.writeframes(bytes(frames))
    return out
