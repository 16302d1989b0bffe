"""Decorative explosion particles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from tank_duel.core.arena import Color

EXPLOSION_PARTICLES = 15
FRICTION = 0.95
FADE_STEP = 0.02


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Color
    alpha: float = 1.0

    def update(self) -> None:
        self.vx *= FRICTION
        self.vy *= FRICTION
        self.x += self.vx
        self.y += self.vy
        self.alpha -= FADE_STEP

    @property
    def alive(self) -> bool:
        return self.alpha > 0


class ParticleSystem:
    """Own the shared particle list and the RNG used to scatter it."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def create_explosion(self, x: float, y: float, color: Color) -> None:
        rng = self.rng
        for _ in range(EXPLOSION_PARTICLES):
            angle = rng.uniform(0.0, math.tau)
            speed = rng.uniform(2.0, 7.0)
            self.particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=math.cos(angle) * speed,
                    vy=math.sin(angle) * speed,
                    size=rng.uniform(2.0, 6.0),
                    color=color,
                )
            )

    def update(self) -> None:
        if not self.particles:
            return
        alive: List[Particle] = []
        for particle in self.particles:
            particle.update()
            if particle.alive:
                alive.append(particle)
        self.particles = alive

    def clear(self) -> None:
        self.particles = []


__all__ = ["EXPLOSION_PARTICLES", "FADE_STEP", "FRICTION", "Particle", "ParticleSystem"]
