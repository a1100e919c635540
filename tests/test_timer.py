"""Unit tests for the incoming-message timer."""
import random

from hypothesis import given
from hypothesis import strategies as st

from termchat.timer import IncomingTimer, random_delay

from helpers import FakeClock


@given(st.integers(min_value=0, max_value=2**32), st.floats(min_value=0.001, max_value=1000))
def test_delay_within_bounds(seed, max_delay):
    rng = random.Random(seed)
    for _ in range(50):
        assert 0 <= random_delay(max_delay, rng) < max_delay


def test_delays_are_not_constant():
    rng = random.Random(7)
    samples = {random_delay(4.0, rng) for _ in range(200)}
    assert len(samples) > 100
    assert all(0 <= s < 4.0 for s in samples)


def test_module_rng_used_by_default():
    assert 0 <= random_delay(4.0) < 4.0


class TestIncomingTimer:
    def test_armed_on_creation(self):
        clock = FakeClock(10.0)
        timer = IncomingTimer(4.0, clock, random.Random(1))
        assert 10.0 <= timer.deadline < 14.0

    def test_expires_when_clock_reaches_deadline(self):
        clock = FakeClock(0.0)
        timer = IncomingTimer(4.0, clock, random.Random(1))
        assert timer.remaining() == timer.deadline
        clock.advance(timer.remaining())
        assert timer.expired()
        assert timer.remaining() == 0.0

    def test_rearm_replaces_deadline(self):
        clock = FakeClock(0.0)
        timer = IncomingTimer(4.0, clock, random.Random(3))
        clock.advance(5.0)
        assert timer.expired()
        new = timer.rearm()
        assert timer.deadline == new
        assert 5.0 <= new < 9.0
