# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Callable
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)


class TickHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        ...


class TickScheduler(ABC):
    """Schedules a repeating callback every `interval` seconds."""

    @abstractmethod
    def every(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        ...


class _JobHandle(TickHandle):
    def __init__(self, scheduler: AsyncIOScheduler, job_id: str):
        self.scheduler = scheduler
        self.job_id = job_id

    def cancel(self) -> None:
        try:
            self.scheduler.remove_job(self.job_id)
        except JobLookupError:
            # Already gone (scheduler shut down)
            pass


class ApschedulerTickScheduler(TickScheduler):
    """
    Countdown ticks as interval jobs on an AsyncIOScheduler. Jobs are
    coroutines so they run on the event loop thread, never in the executor
    pool.
    """

    def __init__(self, scheduler: AsyncIOScheduler):
        self.scheduler = scheduler

    def every(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        async def fire():
            callback()

        job_id = f"tick-{uuid.uuid4()}"
        self.scheduler.add_job(
            fire,
            trigger="interval",
            seconds=interval,
            id=job_id,
            max_instances=1,
            coalesce=False,
            misfire_grace_time=None,
        )
        logger.debug(f"⏱️ Scheduled ticker {job_id} every {interval}s")
        return _JobHandle(self.scheduler, job_id)
