from collections import Counter

import pytest

from soulspace.services.matching_game import GamePhase, MatchingGame
from soulspace.utils.errors import InvalidArgument
from soulspace.utils.wellness_constants import EMOTIONAL_COLORS


@pytest.fixture
def game(ticker, rng):
    return MatchingGame(ticker, rng=rng, round_seconds=45)


def wrong_key(game):
    return next(c.key for c in game.options if c.key != game.target.key)


def test_challenge_has_four_distinct_options_with_target_once(game):
    for _ in range(500):
        game.new_challenge()
        keys = [c.key for c in game.options]

        assert len(keys) == 4
        assert len(set(keys)) == 4
        assert keys.count(game.target.key) == 1


def test_targets_are_roughly_uniform(game):
    counts = Counter()
    for _ in range(6000):
        game.new_challenge()
        counts[game.target.key] += 1

    assert set(counts) == {c.key for c in EMOTIONAL_COLORS}
    for count in counts.values():
        assert 800 < count < 1200


def test_guesses_ignored_before_round(game):
    assert game.phase == GamePhase.ready
    assert game.time_left == 45
    assert game.submit_guess("joy") is False
    assert game.score == 0


def test_start_round(game, ticker):
    game.start_round()

    assert game.phase == GamePhase.playing
    assert game.score == 0
    assert game.target in game.options
    assert game.time_left == 45
    assert len(ticker.active) == 1


def test_scoring(game):
    game.start_round()

    assert game.submit_guess(game.target.key) is True
    assert game.submit_guess(wrong_key(game)) is False
    assert game.submit_guess(game.target.key) is True

    assert game.score == 2


def test_round_ends_when_time_runs_out(ticker, rng):
    ended = []
    game = MatchingGame(ticker, rng=rng, round_seconds=3, on_round_end=ended.append)
    game.start_round()
    game.submit_guess(game.target.key)

    ticker.advance(3)

    assert game.phase == GamePhase.finished
    assert game.time_left == 0
    assert ended == [1]
    assert ticker.active == []

    assert game.submit_guess(game.target.key) is False
    assert game.score == 1


def test_new_round_resets_score_and_timer(ticker, rng):
    game = MatchingGame(ticker, rng=rng, round_seconds=3)
    game.start_round()
    game.submit_guess(game.target.key)
    ticker.advance(3)

    game.start_round()

    assert game.score == 0
    assert game.phase == GamePhase.playing
    assert game.time_left == 3
    assert len(ticker.active) == 1


def test_restart_mid_round_leaves_one_timer(game, ticker):
    game.start_round()
    ticker.advance(10)
    game.start_round()

    assert len(ticker.active) == 1
    assert game.time_left == 45


def test_stop_releases_timer(game, ticker):
    game.start_round()
    game.stop()

    assert ticker.active == []
    assert game.phase == GamePhase.finished
    assert game.submit_guess(game.target.key) is False


@pytest.mark.parametrize("seconds", [0, -5])
def test_bad_round_length_leaves_game_untouched(ticker, rng, seconds):
    game = MatchingGame(ticker, rng=rng, round_seconds=seconds)

    with pytest.raises(InvalidArgument):
        game.start_round()

    assert game.phase == GamePhase.ready
    assert game.target is None
    assert ticker.active == []
    assert game.submit_guess("joy") is False
    assert game.score == 0


def test_bad_round_length_does_not_end_running_round(ticker, rng):
    game = MatchingGame(ticker, rng=rng, round_seconds=5)
    game.start_round()
    game.submit_guess(game.target.key)

    game.round_seconds = 0
    with pytest.raises(InvalidArgument):
        game.start_round()

    assert game.phase == GamePhase.playing
    assert game.score == 1
    assert len(ticker.active) == 1
