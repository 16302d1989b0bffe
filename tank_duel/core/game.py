"""Real-time arena loop for the tank duel."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional, Protocol

from tank_duel.core.arena import PLAYER_COLORS, ArenaSettings, Obstacle, default_obstacles
from tank_duel.core.controls import Controls, InputState
from tank_duel.core.particles import ParticleSystem
from tank_duel.core.tank import Tank

logger = logging.getLogger(__name__)


class StatusListener(Protocol):
    """Display notified of heart, winner and banner changes."""

    def refresh_hearts(self, hp_one: int, hp_two: int) -> None: ...

    def announce_winner(self, winner_id: int) -> None: ...

    def hide_banner(self) -> None: ...


class NullStatus:
    """Status listener that ignores every notification."""

    def refresh_hearts(self, hp_one: int, hp_two: int) -> None:
        pass

    def announce_winner(self, winner_id: int) -> None:
        pass

    def hide_banner(self) -> None:
        pass


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


DEFAULT_CONTROLS: List[Controls] = [
    Controls(forward="KeyW", backward="KeyS", left="KeyA", right="KeyD", shoot="Space"),
    Controls(
        forward="ArrowUp",
        backward="ArrowDown",
        left="ArrowLeft",
        right="ArrowRight",
        shoot="Enter",
    ),
]


class Game:
    """Two tanks, five obstacles and a shared particle pool.

    ``step`` advances one frame while the match is active. The match ends the
    first time a tank's hit points drop to zero; only ``reset`` starts a new
    one.
    """

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        *,
        controls: Optional[List[Controls]] = None,
        status: Optional[StatusListener] = None,
        clock: Callable[[], float] = monotonic_ms,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or ArenaSettings()
        self.controls = list(controls or DEFAULT_CONTROLS)
        if len(self.controls) != 2:
            raise ValueError("exactly two control schemes are required")
        self.status: StatusListener = status or NullStatus()
        self.clock = clock
        self.particles = ParticleSystem(rng)
        self.tanks: List[Tank] = []
        self.obstacles: List[Obstacle] = []
        self.game_active = False
        self.winner_id: Optional[int] = None
        self.frame = 0
        self.reset()

    # ------------------------------------------------------------------
    # Properties
    @property
    def player_one(self) -> Tank:
        return self.tanks[0]

    @property
    def player_two(self) -> Tank:
        return self.tanks[1]

    def tank(self, tank_id: int) -> Tank:
        for tank in self.tanks:
            if tank.id == tank_id:
                return tank
        raise KeyError(f"Unknown tank id {tank_id}")

    def opponent_of(self, tank: Tank) -> Tank:
        return self.player_two if tank is self.player_one else self.player_one

    # ------------------------------------------------------------------
    # Match lifecycle
    def reset(self) -> None:
        self.tanks = self._spawn_tanks()
        self.obstacles = default_obstacles(self.settings)
        self.particles.clear()
        self.winner_id = None
        self.frame = 0
        self.game_active = True
        self._refresh_hearts()
        self.status.hide_banner()
        logger.debug(
            "Match started: %dx%d arena, %d obstacles",
            self.settings.width,
            self.settings.height,
            len(self.obstacles),
        )

    def _spawn_tanks(self) -> List[Tank]:
        settings = self.settings
        tanks: List[Tank] = []
        for idx, (x, y, heading) in enumerate(settings.spawn_points()):
            tanks.append(
                Tank(
                    id=idx + 1,
                    x=x,
                    y=y,
                    heading=heading,
                    color=PLAYER_COLORS[idx],
                    controls=self.controls[idx],
                    hp=settings.starting_hp,
                    radius=settings.tank_radius,
                    speed=settings.tank_speed,
                    rotation_speed=settings.rotation_speed,
                    cooldown=settings.cooldown_ms,
                    on_hit=self._handle_hit,
                )
            )
        return tanks

    def end_game(self, winner_id: int) -> None:
        if not self.game_active:
            return
        self.game_active = False
        self.winner_id = winner_id
        logger.info("Player %d wins after %d frames", winner_id, self.frame)
        self.status.announce_winner(winner_id)

    def _handle_hit(self, tank: Tank) -> None:
        self._refresh_hearts()
        if not tank.alive:
            self.end_game(self.opponent_of(tank).id)

    def _refresh_hearts(self) -> None:
        self.status.refresh_hearts(self.player_one.display_hp, self.player_two.display_hp)

    # ------------------------------------------------------------------
    # Simulation
    def step(self, keys: InputState, now: Optional[float] = None) -> bool:
        """Advance one frame. Returns whether another frame should be scheduled."""

        if not self.game_active:
            return False
        if now is None:
            now = self.clock()
        self.frame += 1
        one, two = self.tanks
        one.update(self.settings, self.obstacles, two, keys, self.particles, now)
        two.update(self.settings, self.obstacles, one, keys, self.particles, now)
        self.particles.update()
        return self.game_active


__all__ = ["DEFAULT_CONTROLS", "Game", "NullStatus", "StatusListener", "monotonic_ms"]
