"""Step clock that plays the timeline and drives highlights."""

from __future__ import annotations

import logging
from typing import Callable

from rhythm_trainer.audio.output import AudioOutput, AudioUnavailable, SilentAudioOutput
from rhythm_trainer.notation.surface import RenderSurface
from rhythm_trainer.playback.clock import Clock, TimerHandle
from rhythm_trainer.playback.steps import StepPlan, plan_step
from rhythm_trainer.timeline.store import TimelineStore
from rhythm_trainer.trainer.settings import SoundMode, TrainerSettings, clamp_bpm, normalize_sound_mode

logger = logging.getLogger(__name__)


class PlaybackScheduler:
    """Advances a sixteenth-note cursor over the store on a repeating timer.

    The scheduler is either stopped or playing. Each timer firing runs
    :meth:`step_once`, which first drops every highlight from the previous
    step before firing the sounds and highlights of the new one.
    Each highlight owns a one-shot clear keyed by a per-slot generation, so a
    clear scheduled for an older highlight never removes a newer one.
    """

    def __init__(
        self,
        store: TimelineStore,
        audio: AudioOutput,
        surface: RenderSurface,
        clock: Clock,
        settings: TrainerSettings | None = None,
    ) -> None:
        self._store = store
        self._audio = audio
        self._surface = surface
        self._clock = clock
        self._settings = settings or TrainerSettings()

        self._timer: TimerHandle | None = None
        self._current_step = 0
        self._generations: dict[int, int] = {}
        self._pending_clears: dict[int, TimerHandle] = {}
        self._lit: set[int] = set()

    @property
    def is_playing(self) -> bool:
        return self._timer is not None

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def tempo(self) -> int:
        return self._settings.bpm

    @property
    def period_ms(self) -> float:
        return self._settings.period_ms

    @property
    def settings(self) -> TrainerSettings:
        return self._settings

    def start(self) -> None:
        if self.is_playing:
            return
        self._current_step = 0
        self._timer = self._clock.call_every(self.period_ms, self.step_once)
        logger.debug("playback started at %d bpm (%.1f ms/step)", self.tempo, self.period_ms)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._current_step = 0
        self._clear_highlights()
        logger.debug("playback stopped")

    def toggle(self) -> bool:
        if self.is_playing:
            self.stop()
        else:
            self.start()
        return self.is_playing

    def retune(self, bpm: int) -> int:
        self._settings.bpm = clamp_bpm(bpm)
        if self._timer is not None:
            self._timer.cancel()
            self._timer = self._clock.call_every(self.period_ms, self.step_once)
            logger.debug("retuned to %d bpm at step %d", self.tempo, self._current_step)
        return self._settings.bpm

    def set_sound_mode(self, mode: SoundMode | str) -> None:
        self._settings.sound_mode = normalize_sound_mode(mode)

    def set_pitch_note(self, note: str) -> None:
        self._settings.pitch_note = note

    def step_once(self) -> StepPlan:
        self._clear_highlights()
        plan = plan_step(self._store.blocks(), self._current_step, self._store.total_steps)

        if plan.tick:
            self._fire(self._audio.play_tick)
        if plan.block is not None:
            if self._settings.sound_mode == "drum":
                self._fire(self._audio.play_tone)
            else:
                note = self._settings.pitch_note
                self._fire(lambda: self._audio.play_pitch(note))
        for slot in plan.highlight:
            self._light(slot)

        self._current_step = (self._current_step + 1) % self._store.total_steps
        return plan

    def _fire(self, play: Callable[[], None]) -> None:
        try:
            play()
        except AudioUnavailable as exc:
            logger.warning("audio unavailable, continuing without sound: %s", exc)
            self._audio = SilentAudioOutput()

    def _light(self, slot: int) -> None:
        generation = self._generations.get(slot, 0) + 1
        self._generations[slot] = generation
        previous = self._pending_clears.pop(slot, None)
        if previous is not None:
            previous.cancel()
        self._lit.add(slot)
        self._surface.set_highlight(slot, True)
        self._pending_clears[slot] = self._clock.call_later(
            self.period_ms, lambda: self._unlight(slot, generation)
        )

    def _unlight(self, slot: int, generation: int) -> None:
        if self._generations.get(slot) != generation:
            return
        self._pending_clears.pop(slot, None)
        self._lit.discard(slot)
        self._surface.set_highlight(slot, False)

    def _clear_highlights(self) -> None:
        for handle in self._pending_clears.values():
            handle.cancel()
        self._pending_clears.clear()
        for slot in sorted(self._lit):
            self._generations[slot] = self._generations.get(slot, 0) + 1
            self._surface.set_highlight(slot, False)
        self._lit.clear()
