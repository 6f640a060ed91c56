import os
import random
import tempfile
from datetime import datetime, timedelta

from cryptography.fernet import Fernet

# Must be set before soulspace modules are imported
os.environ.setdefault("FERNET_SECRET", Fernet.generate_key().decode())
os.environ["SOULSPACE_DATABASE_URL"] = f"sqlite:///{tempfile.mkdtemp(prefix='soulspace-tests-')}/soulspace.db"

import pytest

from soulspace.services.log_store import LogStore
from soulspace.services.storage_medium import InMemoryStorage
from soulspace.utils.schedulers.tick_scheduler import TickHandle, TickScheduler


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class ManualTicker(TickHandle):
    def __init__(self, owner, interval, callback):
        self.owner = owner
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True
        if self in self.owner.active:
            self.owner.active.remove(self)


class ManualTickScheduler(TickScheduler):
    """Fires tickers only when the test says a second has passed."""

    def __init__(self):
        self.active = []

    def every(self, interval, callback):
        ticker = ManualTicker(self, interval, callback)
        self.active.append(ticker)
        return ticker

    def advance(self, times: int = 1) -> None:
        for _ in range(times):
            for ticker in list(self.active):
                if not ticker.cancelled:
                    ticker.callback()


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 1, 4, 9, 0, 0))


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def log_store(storage, clock):
    return LogStore(storage, clock=clock)


@pytest.fixture
def ticker():
    return ManualTickScheduler()


@pytest.fixture
def rng():
    return random.Random(1234)
