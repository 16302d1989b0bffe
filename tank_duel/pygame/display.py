"""Window and render-target management for the pygame client."""

from __future__ import annotations

from typing import Tuple

import pygame

from tank_duel.core.arena import ArenaSettings


class DisplayManager:
    """Own the window surface and the arena-sized playfield drawn into it.

    The playfield uses arena coordinates directly; it is blitted below a HUD
    strip of ``ui_height`` pixels.
    """

    def __init__(self, settings: ArenaSettings, *, ui_height: int, caption: str) -> None:
        self.caption = caption
        self.ui_height = ui_height
        self.arena_size: Tuple[int, int] = (settings.width, settings.height)
        window_size = (settings.width, settings.height + ui_height)
        self.display_surface = pygame.display.set_mode(window_size)
        pygame.display.set_caption(self.caption)
        self.playfield = pygame.Surface(self.arena_size).convert()

    @property
    def screen(self) -> pygame.Surface:
        return self.display_surface

    @property
    def playfield_rect(self) -> pygame.Rect:
        return pygame.Rect((0, self.ui_height), self.arena_size)

    def compose(self) -> None:
        self.display_surface.fill((0, 0, 0))
        self.display_surface.blit(self.playfield, self.playfield_rect.topleft)


__all__ = ["DisplayManager"]
