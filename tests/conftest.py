import random

import pytest

from tank_duel.core.arena import ArenaSettings
from tank_duel.core.controls import InputState
from tank_duel.core.game import DEFAULT_CONTROLS, Game
from tank_duel.core.session import GameSession


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 10_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def settings() -> ArenaSettings:
    return ArenaSettings()


@pytest.fixture
def keys() -> InputState:
    return InputState()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def p1_controls():
    return DEFAULT_CONTROLS[0]


@pytest.fixture
def p2_controls():
    return DEFAULT_CONTROLS[1]


@pytest.fixture
def session(settings: ArenaSettings, clock: FakeClock) -> GameSession:
    """Provide a deterministic match wired to a recording status sink."""

    return GameSession(settings, clock=clock, rng=random.Random(1234))


@pytest.fixture
def game(session: GameSession) -> Game:
    return session.game
