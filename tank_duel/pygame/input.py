"""Input handling for the pygame client."""

from __future__ import annotations

import pygame

from tank_duel.core.controls import InputState


class InputHandler:
    """Translate pygame events into key levels and application actions."""

    def __init__(self, app) -> None:
        self.app = app
        self.keys = InputState()

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self.keys.press(event.key)
            self._handle_key(event.key)
        elif event.type == pygame.KEYUP:
            self.keys.release(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are not delivered while unfocused.
            self.keys.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key(self, key: int) -> None:
        app = self.app
        if key == pygame.K_ESCAPE:
            app.running = False
            return
        if key == pygame.K_r and not app.session.active:
            app.restart()


__all__ = ["InputHandler"]
