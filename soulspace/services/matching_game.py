# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import enum
import logging
import os
import random
from typing import Callable, List, Optional
from soulspace.services.countdown_engine import Countdown, validate_duration
from soulspace.utils.schedulers.tick_scheduler import TickScheduler
from soulspace.utils.wellness_constants import EMOTIONAL_COLORS, EmotionColor

logger = logging.getLogger(__name__)

GAME_DURATION_SECONDS = int(os.getenv("GAME_DURATION_SECONDS", "45"))
OPTION_COUNT = 4


class GamePhase(enum.Enum):
    ready = "ready"
    playing = "playing"
    finished = "finished"


class MatchingGame:
    """Colour Harmony: match the target emotion to its colour before time runs out."""

    def __init__(
        self,
        scheduler: TickScheduler,
        rng: Optional[random.Random] = None,
        round_seconds: int = GAME_DURATION_SECONDS,
        on_tick: Optional[Callable[[int], None]] = None,
        on_round_end: Optional[Callable[[int], None]] = None,
        interval: float = 1.0,
    ):
        self.rng = rng or random.Random()
        self.round_seconds = round_seconds
        self.on_tick = on_tick
        self.on_round_end = on_round_end

        self.score = 0
        self.phase = GamePhase.ready
        self.target: Optional[EmotionColor] = None
        self.options: List[EmotionColor] = []

        self.countdown = Countdown(
            scheduler,
            on_tick=self._handle_tick,
            on_finish=self._handle_finish,
            interval=interval,
        )

    @property
    def time_left(self) -> int:
        if self.phase == GamePhase.ready:
            return self.round_seconds
        return self.countdown.remaining_seconds

    def new_challenge(self) -> None:
        target = self.rng.choice(EMOTIONAL_COLORS)
        decoys = self.rng.sample([c for c in EMOTIONAL_COLORS if c.key != target.key], OPTION_COUNT - 1)

        options = decoys + [target]
        self.rng.shuffle(options)

        self.target = target
        self.options = options

    def start_round(self) -> None:
        validate_duration(self.round_seconds)
        self.countdown.stop()
        self.score = 0
        self.phase = GamePhase.playing
        self.new_challenge()
        self.countdown.start(self.round_seconds)
        logger.info(f"🎮 Colour Harmony round started ({self.round_seconds}s)")

    def submit_guess(self, key: str) -> bool:
        if self.phase != GamePhase.playing:
            return False

        correct = key == self.target.key
        if correct:
            self.score += 1
        self.new_challenge()
        return correct

    def stop(self) -> None:
        """Ends the round early, e.g. when the player leaves the game screen."""
        self.countdown.stop()
        if self.phase == GamePhase.playing:
            self.phase = GamePhase.finished

    def _handle_tick(self, remaining: int) -> None:
        if self.on_tick:
            self.on_tick(remaining)

    def _handle_finish(self) -> None:
        self.phase = GamePhase.finished
        logger.info(f"🏁 Colour Harmony round over, score {self.score}")
        if self.on_round_end:
            self.on_round_end(self.score)
