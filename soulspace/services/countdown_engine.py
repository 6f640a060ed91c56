# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import enum
import logging
from typing import Callable, Optional
from pydantic import BaseModel
from soulspace.utils.errors import InvalidArgument
from soulspace.utils.schedulers.tick_scheduler import TickHandle, TickScheduler

logger = logging.getLogger(__name__)


def validate_duration(total_seconds) -> None:
    if isinstance(total_seconds, bool) or not isinstance(total_seconds, int) or total_seconds <= 0:
        raise InvalidArgument(f"Countdown duration must be a positive number of seconds, got {total_seconds!r}")


class CountdownPhase(enum.Enum):
    idle = "idle"
    running = "running"
    finished = "finished"


class CountdownState(BaseModel):
    total_seconds: int
    remaining_seconds: int
    phase: CountdownPhase


class Countdown:
    """
    Single-shot countdown. Emits `on_tick(remaining)` once per interval while
    running, then `on_finish()` exactly once when remaining hits zero.

    Each run gets a new generation number; a tick that was already dispatched
    for an older generation is dropped, so nothing is emitted after stop().
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        on_tick: Optional[Callable[[int], None]] = None,
        on_finish: Optional[Callable[[], None]] = None,
        interval: float = 1.0,
    ):
        self.scheduler = scheduler
        self.on_tick = on_tick
        self.on_finish = on_finish
        self.interval = interval

        self.total_seconds = 0
        self.remaining_seconds = 0
        self.phase = CountdownPhase.idle

        self._generation = 0
        self._handle: Optional[TickHandle] = None

    @property
    def state(self) -> CountdownState:
        return CountdownState(
            total_seconds=self.total_seconds,
            remaining_seconds=self.remaining_seconds,
            phase=self.phase,
        )

    @property
    def progress(self) -> float:
        if not self.total_seconds:
            return 0.0
        return 1 - (self.remaining_seconds / self.total_seconds)

    def format_remaining(self) -> str:
        minutes, seconds = divmod(self.remaining_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def start(self, total_seconds: int) -> None:
        validate_duration(total_seconds)

        self._release()

        self._generation += 1
        generation = self._generation

        self.total_seconds = total_seconds
        self.remaining_seconds = total_seconds
        self.phase = CountdownPhase.running
        self._handle = self.scheduler.every(self.interval, lambda: self._tick(generation))

    def stop(self) -> None:
        self._generation += 1
        self._release()
        self.phase = CountdownPhase.idle

    def _release(self) -> None:
        if self._handle is not None:
            handle, self._handle = self._handle, None
            handle.cancel()

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation and self.phase == CountdownPhase.running

    def _tick(self, generation: int) -> None:
        if not self._is_current(generation):
            return

        self.remaining_seconds -= 1
        if self.on_tick:
            self.on_tick(self.remaining_seconds)

        # on_tick may have stopped or restarted us
        if self.remaining_seconds > 0 or not self._is_current(generation):
            return

        self.phase = CountdownPhase.finished
        self._release()
        logger.debug(f"⏹️ Countdown of {self.total_seconds}s finished")
        if self.on_finish:
            self.on_finish()
