"""Timer abstraction driving the playback scheduler."""

from __future__ import annotations

from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    def call_every(self, period_ms: float, callback: Callable[[], None]) -> TimerHandle: ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...
