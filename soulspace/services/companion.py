# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import random
from datetime import datetime
from typing import Callable, Optional
from soulspace.services.identity_provider import ensure_identity
from soulspace.services.log_store import LogStore
from soulspace.services.matching_game import MatchingGame
from soulspace.services.meditation_session import MeditationSession
from soulspace.services.safe_space_feed import SafeSpaceFeed
from soulspace.services.storage_medium import KeyValueStorage
from soulspace.utils.clock import local_now, to_calendar_date
from soulspace.utils.schedulers.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)


class Companion:
    """Everything one running app needs: identity, logs and the activities."""

    def __init__(
        self,
        storage: KeyValueStorage,
        scheduler: TickScheduler,
        clock: Callable[[], datetime] = local_now,
        rng: Optional[random.Random] = None,
    ):
        rng = rng or random.Random()
        self.clock = clock

        # Fatal if storage is down
        self.guest_id = ensure_identity(storage)
        self.log_store = LogStore(storage, clock=clock, guest_id=self.guest_id)

        self.meditation = MeditationSession(scheduler)
        self.game = MatchingGame(scheduler, rng=rng)
        self.feed = SafeSpaceFeed(rng=rng, clock=clock)
        logger.info(f"🌱 Companion ready for guest {self.guest_id}")

    def today(self):
        return to_calendar_date(self.clock())

    def shutdown(self) -> None:
        self.meditation.close()
        self.game.stop()
