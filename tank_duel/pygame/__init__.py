"""Pygame front-end for the tank duel."""

from tank_duel.pygame.app import PygameTankDuel, run_pygame

__all__ = ["PygameTankDuel", "run_pygame"]
