from __future__ import annotations

import math
import random

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from tank_duel.core.controls import InputState
from tank_duel.core.game import DEFAULT_CONTROLS, Game

ALL_KEYS = [key for controls in DEFAULT_CONTROLS for key in controls.keys()]

frames_strategy = st.lists(
    st.tuples(
        st.frozensets(st.sampled_from(ALL_KEYS), max_size=6),
        st.integers(min_value=0, max_value=120),
    ),
    min_size=1,
    max_size=240,
)


class ListeningStatus:
    def __init__(self) -> None:
        self.winners: list[int] = []

    def refresh_hearts(self, hp_one: int, hp_two: int) -> None:
        pass

    def announce_winner(self, winner_id: int) -> None:
        self.winners.append(winner_id)

    def hide_banner(self) -> None:
        pass


@pytest.mark.property
@settings(max_examples=25, deadline=None)
@given(frames=frames_strategy, seed=st.integers(min_value=0, max_value=5_000))
def test_tanks_respect_arena_invariants(frames, seed: int) -> None:
    """Random key mashing never pushes a tank into a wall, obstacle or the other tank."""

    now = [0.0]
    status = ListeningStatus()
    game = Game(status=status, clock=lambda: now[0], rng=random.Random(seed))
    keys = InputState()
    previous_hp = [tank.hp for tank in game.tanks]
    shot_times: dict[int, list[float]] = {1: [], 2: []}

    for held, elapsed in frames:
        keys.clear()
        for key in held:
            keys.press(key)
        now[0] += elapsed
        last_shots = [tank.last_shot for tank in game.tanks]
        game.step(keys)

        one, two = game.tanks
        for idx, tank in enumerate(game.tanks):
            r = tank.radius
            assert r <= tank.x <= game.settings.width - r
            assert r <= tank.y <= game.settings.height - r
            assert not any(o.overlaps_square(tank.x, tank.y, r) for o in game.obstacles)
            assert tank.hp <= previous_hp[idx]
            previous_hp[idx] = tank.hp
            if tank.last_shot != last_shots[idx]:
                shot_times[tank.id].append(tank.last_shot)
            assert all(p.active for p in tank.projectiles)
        assert math.hypot(one.x - two.x, one.y - two.y) >= one.radius * 2

    for times in shot_times.values():
        for earlier, later in zip(times, times[1:]):
            assert later - earlier >= game.tanks[0].cooldown

    assert len(status.winners) <= 1
    if status.winners:
        survivor = game.tank(status.winners[0])
        assert survivor.alive
        assert not game.opponent_of(survivor).alive
