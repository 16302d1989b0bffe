"""Rendering helpers for the pygame front-end."""

from tank_duel.pygame.renderer.scene import (
    draw_background,
    draw_obstacles,
    draw_particles,
    draw_projectile,
    draw_tank,
    draw_tanks,
)

__all__ = [
    "draw_background",
    "draw_obstacles",
    "draw_particles",
    "draw_projectile",
    "draw_tank",
    "draw_tanks",
]
