"""Core game logic for the tank duel, independent of rendering."""

from tank_duel.core.arena import (
    OBSTACLE_COLOR,
    PLAYER_COLORS,
    PLAYER_DARK_COLORS,
    ArenaSettings,
    Obstacle,
    default_obstacles,
)
from tank_duel.core.controls import Controls, InputState
from tank_duel.core.game import DEFAULT_CONTROLS, Game, NullStatus, StatusListener
from tank_duel.core.particles import Particle, ParticleSystem
from tank_duel.core.projectile import Projectile
from tank_duel.core.session import GameSession
from tank_duel.core.tank import Tank

__all__ = [
    "ArenaSettings",
    "Controls",
    "DEFAULT_CONTROLS",
    "Game",
    "GameSession",
    "InputState",
    "NullStatus",
    "OBSTACLE_COLOR",
    "Obstacle",
    "PLAYER_COLORS",
    "PLAYER_DARK_COLORS",
    "Particle",
    "ParticleSystem",
    "Projectile",
    "StatusListener",
    "Tank",
    "default_obstacles",
]
