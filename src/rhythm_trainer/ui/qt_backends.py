"""Qt implementations of the clock and audio output collaborators."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QObject, Qt, QTimer, QUrl
from PySide6.QtMultimedia import QSoundEffect

from rhythm_trainer.audio.notes import is_valid_note_name
from rhythm_trainer.audio.output import AudioOutput, AudioUnavailable, SilentAudioOutput
from rhythm_trainer.audio.voices import render_pitch, render_tick, render_tone, write_wav_int16_mono

logger = logging.getLogger(__name__)


class QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtClock:
    def __init__(self, parent: QObject) -> None:
        self._parent = parent

    def call_every(self, period_ms: float, callback: Callable[[], None]) -> QtTimerHandle:
        timer = self._timer(period_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTimerHandle(timer)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> QtTimerHandle:
        timer = self._timer(delay_ms)
        timer.setSingleShot(True)
        handle = QtTimerHandle(timer)
        timer.timeout.connect(callback)
        timer.timeout.connect(handle.cancel)
        timer.start()
        return handle

    def _timer(self, interval_ms: float) -> QTimer:
        timer = QTimer(self._parent)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setInterval(max(int(round(interval_ms)), 1))
        return timer


class QtSoundOutput:
    """Plays pre-rendered voice WAVs through ``QSoundEffect``."""

    def __init__(self, cache_dir: str | Path | None = None, parent: QObject | None = None) -> None:
        self._cache_dir = Path(cache_dir) if cache_dir else Path(tempfile.gettempdir()) / "rhythm_trainer" / "voices"
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        self._parent = parent
        self._volume = 1.0
        self._tick = self._effect(write_wav_int16_mono(self._cache_dir / "tick.wav", render_tick()))
        self._tone = self._effect(write_wav_int16_mono(self._cache_dir / "tone.wav", render_tone()))
        self._pitches: dict[str, QSoundEffect] = {}

    def play_tick(self) -> None:
        self._play(self._tick)

    def play_tone(self) -> None:
        self._play(self._tone)

    def play_pitch(self, note_name: str) -> None:
        key = note_name if is_valid_note_name(note_name) else "default"
        effect = self._pitches.get(key)
        if effect is None:
            path = write_wav_int16_mono(self._cache_dir / f"pitch-{key.replace('#', 's')}.wav", render_pitch(note_name))
            effect = self._effect(path)
            self._pitches[key] = effect
        self._play(effect)

    def set_master_volume(self, volume: float) -> None:
        self._volume = min(max(float(volume), 0.0), 1.0)
        for effect in (self._tick, self._tone, *self._pitches.values()):
            effect.setVolume(self._volume)

    def _effect(self, path: Path) -> QSoundEffect:
        effect = QSoundEffect(self._parent)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.setVolume(self._volume)
        return effect

    def _play(self, effect: QSoundEffect) -> None:
        if effect.status() == QSoundEffect.Status.Error:
            raise AudioUnavailable(f"cannot play {effect.source().toLocalFile()}")
        if effect.isPlaying():
            effect.stop()
        effect.play()


def create_audio_output(cache_dir: str | Path | None = None, parent: QObject | None = None) -> AudioOutput:
    try:
        return QtSoundOutput(cache_dir=cache_dir, parent=parent)
    except (OSError, AudioUnavailable) as exc:
        logger.warning("audio device unavailable, running silent: %s", exc)
        return SilentAudioOutput()
