import asyncio

import pytest
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from soulspace.services.countdown_engine import Countdown, CountdownPhase
from soulspace.utils.errors import InvalidArgument, ValidationError
from soulspace.utils.schedulers.tick_scheduler import ApschedulerTickScheduler, TickHandle, TickScheduler


class Recorder:
    def __init__(self):
        self.ticks = []
        self.finished = 0

    def tick(self, remaining):
        self.ticks.append(remaining)

    def finish(self):
        self.finished += 1


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def countdown(ticker, recorder):
    return Countdown(ticker, on_tick=recorder.tick, on_finish=recorder.finish)


def test_five_second_countdown(countdown, ticker, recorder):
    countdown.start(5)
    assert countdown.phase == CountdownPhase.running

    ticker.advance(5)

    assert recorder.ticks == [4, 3, 2, 1, 0]
    assert recorder.finished == 1
    assert countdown.phase == CountdownPhase.finished
    assert ticker.active == []


def test_nothing_after_finish(countdown, ticker, recorder):
    countdown.start(2)
    stale = ticker.active[0]
    ticker.advance(2)

    stale.callback()
    ticker.advance(3)

    assert recorder.ticks == [1, 0]
    assert recorder.finished == 1


def test_stop_after_two_ticks_silences_everything(countdown, ticker, recorder):
    countdown.start(5)
    ticker.advance(2)

    countdown.stop()
    ticker.advance(10)

    assert recorder.ticks == [4, 3]
    assert recorder.finished == 0
    assert countdown.phase == CountdownPhase.idle
    assert ticker.active == []


def test_tick_already_dispatched_before_stop_is_dropped(countdown, ticker, recorder):
    countdown.start(5)
    pending = ticker.active[0]

    countdown.stop()
    pending.callback()

    assert recorder.ticks == []
    assert recorder.finished == 0


@pytest.mark.parametrize("bad", [0, -3, 1.5, True, "5", None])
def test_start_rejects_non_positive_or_non_integer(countdown, ticker, bad):
    with pytest.raises(InvalidArgument):
        countdown.start(bad)

    assert countdown.phase == CountdownPhase.idle
    assert ticker.active == []


def test_invalid_argument_is_a_validation_error():
    assert issubclass(InvalidArgument, ValidationError)


def test_restart_after_finish_is_fresh(countdown, ticker, recorder):
    countdown.start(2)
    ticker.advance(2)

    countdown.start(3)
    ticker.advance(3)

    assert recorder.ticks == [1, 0, 2, 1, 0]
    assert recorder.finished == 2
    assert countdown.total_seconds == 3


def test_restart_while_running_replaces_timer(countdown, ticker, recorder):
    countdown.start(10)
    ticker.advance(3)
    old = ticker.active[0]

    countdown.start(2)
    assert ticker.active != [old]
    assert len(ticker.active) == 1

    old.callback()
    ticker.advance(2)

    assert recorder.ticks == [9, 8, 7, 1, 0]
    assert recorder.finished == 1


def test_stop_from_inside_tick_prevents_finish(ticker):
    events = []

    def on_tick(remaining):
        events.append(remaining)
        countdown.stop()

    countdown = Countdown(ticker, on_tick=on_tick, on_finish=lambda: events.append("finished"))
    countdown.start(1)
    ticker.advance(3)

    assert events == [0]
    assert countdown.phase == CountdownPhase.idle


def test_progress_and_display(countdown, ticker):
    assert countdown.progress == 0.0

    countdown.start(125)
    assert countdown.format_remaining() == "02:05"

    ticker.advance(25)
    assert countdown.format_remaining() == "01:40"
    assert countdown.progress == pytest.approx(25 / 125)
    assert countdown.state.remaining_seconds == 100


def test_apscheduler_drives_ticks_on_the_event_loop():
    async def scenario():
        scheduler = AsyncIOScheduler()
        scheduler.start()
        done = asyncio.Event()
        recorder = Recorder()

        def on_finish():
            recorder.finish()
            done.set()

        countdown = Countdown(
            ApschedulerTickScheduler(scheduler),
            on_tick=recorder.tick,
            on_finish=on_finish,
            interval=0.05,
        )
        countdown.start(3)
        await asyncio.wait_for(done.wait(), timeout=5)
        await asyncio.sleep(0.2)

        jobs_left = scheduler.get_jobs()
        scheduler.shutdown(wait=False)
        return recorder, jobs_left

    recorder, jobs_left = asyncio.run(scenario())

    assert recorder.ticks == [2, 1, 0]
    assert recorder.finished == 1
    assert jobs_left == []


def test_scheduler_interfaces_are_abstract():
    with pytest.raises(TypeError):
        TickScheduler()
    with pytest.raises(TypeError):
        TickHandle()
