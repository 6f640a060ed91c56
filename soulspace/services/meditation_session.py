# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from typing import Callable, Optional
from soulspace.services.countdown_engine import Countdown, CountdownPhase, validate_duration
from soulspace.utils.errors import ValidationError
from soulspace.utils.schedulers.tick_scheduler import TickScheduler
from soulspace.utils.wellness_constants import MEDITATIONS, Meditation

logger = logging.getLogger(__name__)


def find_meditation(title: str) -> Meditation:
    for meditation in MEDITATIONS:
        if meditation.title == title:
            return meditation
    raise ValidationError(f"Unknown meditation: {title!r}")


class MeditationSession:
    """
    Guided meditation timer. One countdown per session; finishing it marks the
    session complete and tells the owner so it can close the player.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        on_complete: Optional[Callable[[Meditation], None]] = None,
        interval: float = 1.0,
    ):
        self.on_complete = on_complete
        self.meditation: Optional[Meditation] = None
        self.completed = False
        self.countdown = Countdown(scheduler, on_finish=self._handle_finish, interval=interval)

    def begin(self, title: str) -> Meditation:
        meditation = find_meditation(title)
        duration_seconds = meditation.duration_minutes * 60
        validate_duration(duration_seconds)
        self.countdown.stop()
        self.meditation = meditation
        self.completed = False
        self.countdown.start(duration_seconds)
        logger.info(f"🧘 Meditation '{meditation.title}' started ({meditation.duration_minutes} min)")
        return meditation

    def close(self) -> None:
        self.countdown.stop()
        self.meditation = None

    def status(self) -> dict:
        return {
            "title": self.meditation.title if self.meditation else None,
            "phase": self.countdown.phase.value,
            "remaining_seconds": self.countdown.remaining_seconds,
            "display": self.countdown.format_remaining(),
            "progress": round(self.countdown.progress * 100, 1),
            "completed": self.completed,
        }

    @property
    def is_running(self) -> bool:
        return self.countdown.phase == CountdownPhase.running

    def _handle_finish(self) -> None:
        self.completed = True
        meditation = self.meditation
        logger.info(f"✅ Meditation '{meditation.title}' completed")
        self.close()
        if self.on_complete:
            self.on_complete(meditation)
