"""Top-level package for the two-player tank duel."""

__version__ = "1.0.0"

from tank_duel.core import (
    ArenaSettings,
    Controls,
    Game,
    GameSession,
    InputState,
    Obstacle,
    Particle,
    ParticleSystem,
    Projectile,
    Tank,
)

__all__ = [
    "ArenaSettings",
    "Controls",
    "Game",
    "GameSession",
    "InputState",
    "Obstacle",
    "Particle",
    "ParticleSystem",
    "Projectile",
    "Tank",
    "__version__",
]
