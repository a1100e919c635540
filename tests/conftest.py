"""Pytest configuration and shared fixtures."""
import random

import pytest

from helpers import FakeClock, FakeTerminal, TtyStdin


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def term(clock):
    return FakeTerminal(clock=clock)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def tty_stdin(monkeypatch):
    stdin = TtyStdin()
    monkeypatch.setattr("sys.stdin", stdin)
    return stdin
