"""Projectiles fired by tanks."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tank_duel.core.arena import ArenaSettings


@dataclass
class Projectile:
    """A point travelling in a straight line at fixed speed."""

    x: float
    y: float
    heading: float
    owner: int
    speed: float = 7.0
    radius: float = 8.0
    active: bool = True

    def advance(self, settings: ArenaSettings) -> None:
        self.x += math.cos(self.heading) * self.speed
        self.y += math.sin(self.heading) * self.speed
        if not settings.contains(self.x, self.y):
            self.active = False

    def deactivate(self) -> None:
        self.active = False


__all__ = ["Projectile"]
