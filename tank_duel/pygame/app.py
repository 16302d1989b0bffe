"""Pygame-powered presentation layer for the tank duel."""

from __future__ import annotations

import logging
import random
from typing import Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Tank Duel."
    ) from exc

from tank_duel.core.arena import OBSTACLE_COLOR, PLAYER_COLORS, ArenaSettings
from tank_duel.core.game import Game
from tank_duel.core.session import GameSession
from tank_duel.pygame.display import DisplayManager
from tank_duel.pygame.input import InputHandler
from tank_duel.pygame.keybindings import default_bindings, describe_bindings
from tank_duel.pygame.menus import draw_ui, draw_winner_overlay
from tank_duel.pygame.renderer import (
    draw_background,
    draw_obstacles,
    draw_particles,
    draw_tanks,
)

logger = logging.getLogger(__name__)


class PygameTankDuel:
    """Graphical client built on top of the core game logic."""

    def __init__(
        self,
        player_one: str = "Player 1",
        player_two: str = "Player 2",
        settings: Optional[ArenaSettings] = None,
        seed: Optional[int] = None,
        fps: int = 60,
        ui_height: int = 56,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.settings = settings or ArenaSettings()
        self.fps = fps
        self._ui_height = ui_height
        self.display = DisplayManager(
            self.settings,
            ui_height=ui_height,
            caption="Tank Duel",
        )

        self.font_small = pygame.font.SysFont("consolas", 16)
        self.font_regular = pygame.font.SysFont("consolas", 20)
        self.font_large = pygame.font.SysFont(None, 72)

        self.clock = pygame.time.Clock()
        self.running = True

        self.tank_colors = [pygame.Color(*color) for color in PLAYER_COLORS]
        self.obstacle_color = pygame.Color(*OBSTACLE_COLOR)

        self.player_bindings = default_bindings()
        self.session = GameSession(
            self.settings,
            controls=self.player_bindings,
            player_names=(player_one, player_two),
            rng=random.Random(seed) if seed is not None else None,
        )
        self.input = InputHandler(self)
        for name, bindings in zip(self.session.player_names, self.player_bindings):
            logger.info("%s: %s", name, describe_bindings(bindings))

    @property
    def ui_height(self) -> int:
        return self._ui_height

    @property
    def screen(self) -> pygame.Surface:
        return self.display.screen

    @property
    def playfield(self) -> pygame.Surface:
        return self.display.playfield

    @property
    def game(self) -> Game:
        return self.session.game

    # ------------------------------------------------------------------
    # Game Loop helpers
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            self._update()
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            else:
                self.input.process_event(event)

    def _update(self) -> None:
        # The match stops advancing once a winner is announced; only a
        # restart schedules frames again.
        if self.session.active:
            self.session.step(self.input.keys)

    def _draw(self) -> None:
        game = self.game
        draw_background(self)
        draw_obstacles(self, game.obstacles)
        draw_tanks(self, game.tanks)
        draw_particles(self, game.particles)
        self.display.compose()
        draw_ui(self)
        draw_winner_overlay(self)
        pygame.display.flip()

    # ------------------------------------------------------------------
    # Actions
    def restart(self) -> None:
        logger.info("Restarting match (round %d)", self.session.rounds_played + 1)
        self.input.keys.clear()
        self.session.restart()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameTankDuel(**kwargs)
    app.run()
