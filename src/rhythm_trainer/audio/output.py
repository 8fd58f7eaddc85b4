"""Audio output collaborator contract."""

from __future__ import annotations

from typing import Protocol


class AudioUnavailable(RuntimeError):
    """Raised when the audio device cannot be opened or played."""


class AudioOutput(Protocol):
    def play_tick(self) -> None: ...

    def play_tone(self) -> None: ...

    def play_pitch(self, note_name: str) -> None: ...

    def set_master_volume(self, volume: float) -> None: ...


class SilentAudioOutput:
    """Accepts every call and plays nothing; used when no device is available."""

    def __init__(self) -> None:
        self.master_volume = 1.0

    def play_tick(self) -> None:
        return None

    def play_tone(self) -> None:
        return None

    def play_pitch(self, note_name: str) -> None:
        return None

    def set_master_volume(self, volume: float) -> None:
        self.master_volume = min(max(float(volume), 0.0), 1.0)
