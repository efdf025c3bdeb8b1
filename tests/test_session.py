from dataclasses import replace

import pytest

from neonsnake.config import (
    INITIAL_FOOD, INITIAL_INTERVAL, INITIAL_SNAKE,
    STATE_OVER, STATE_PAUSED, STATE_PLAYING, STATE_READY,
)
from neonsnake.grid import Point
from neonsnake.model import Direction, initial_state
from neonsnake.session import GameSession

from conftest import FixedPlacer, make_state


class TestNewSession:
    """A fresh session waits, paused, at the starting position."""

    def test_initial_snapshot(self):
        state = GameSession().state
        assert state.snake == INITIAL_SNAKE
        assert state.food == INITIAL_FOOD
        assert state.direction == Direction.UP
        assert state.score == 0 and state.high_score == 0
        assert state.interval == INITIAL_INTERVAL
        assert state.is_paused and not state.is_over
        assert state.phase == STATE_READY

    def test_step_does_nothing_until_resumed(self):
        session = GameSession()
        before = session.state
        session.step()
        assert session.state is before


class TestLifecycle:
    def test_resume_pause_cycle(self):
        session = GameSession(placer=FixedPlacer())
        session.resume()
        assert session.state.phase == STATE_PLAYING
        session.step()
        session.pause()
        assert session.state.phase == STATE_PAUSED
        session.toggle_pause()
        assert session.is_running

    def test_pause_toggle_ignored_after_game_over(self):
        session = GameSession(state=make_state([(5, 5), (5, 6), (5, 7)], is_over=True))
        session.toggle_pause()
        session.resume()
        assert session.state.is_over
        assert not session.state.is_paused
        assert session.state.phase == STATE_OVER

    def test_reset_after_game_over_keeps_high_score(self):
        over = make_state([(5, 5), (5, 6), (5, 7), (5, 8)], score=50, high_score=30, is_over=True,
                          interval=100, tick=40)
        session = GameSession(placer=FixedPlacer(Point(3, 3)), state=over)
        session.reset()
        state = session.state

        assert state.score == 0
        assert state.high_score == 30
        assert not state.is_over
        assert state.is_paused
        assert state.snake == INITIAL_SNAKE
        assert state.direction == Direction.UP
        assert state.last_direction == Direction.UP
        assert state.interval == INITIAL_INTERVAL
        assert state.food == (3, 3)
        assert state.phase == STATE_READY

    def test_reset_places_food_off_snake(self):
        placer = FixedPlacer(Point(1, 1))
        session = GameSession(placer=placer)
        session.reset()
        assert placer.calls == [tuple(INITIAL_SNAKE)]


class TestDirection:
    def test_set_direction_applies_on_next_step(self):
        session = GameSession(placer=FixedPlacer())
        session.resume()
        session.set_direction(Direction.RIGHT)
        assert session.state.head == (10, 10)
        session.step()
        assert session.state.head == (11, 10)
        assert session.state.last_direction == Direction.RIGHT

    def test_queued_reversal_between_ticks_is_rejected(self):
        session = GameSession(placer=FixedPlacer())
        session.resume()
        session.set_direction(Direction.LEFT)
        session.set_direction(Direction.DOWN)
        session.step()
        assert not session.state.is_over
        assert session.state.head == (9, 10)


class TestSubscribe:
    def test_listener_gets_every_change(self):
        session = GameSession(placer=FixedPlacer())
        seen = []
        session.subscribe(seen.append)

        session.resume()
        session.set_direction(Direction.LEFT)
        session.step()

        assert len(seen) == 3
        assert seen[-1] is session.state
        assert seen[0].is_running

    def test_no_notification_without_change(self):
        session = GameSession()
        seen = []
        session.subscribe(seen.append)
        session.step()
        session.set_direction(Direction.DOWN)
        assert seen == []

    def test_unsubscribe(self):
        session = GameSession()
        seen = []
        unsubscribe = session.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        session.toggle_pause()
        assert seen == []

    def test_snapshots_are_immutable(self):
        session = GameSession()
        state = session.state
        with pytest.raises(AttributeError):
            state.score = 100
        assert session.state.score == 0
        assert replace(state, score=10).score == 10
        assert initial_state() == state
