"""Tank entity definitions and actions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from tank_duel.core.arena import OBSTACLE_COLOR, ArenaSettings, Color, Obstacle
from tank_duel.core.controls import Controls, InputState
from tank_duel.core.particles import ParticleSystem
from tank_duel.core.projectile import Projectile

logger = logging.getLogger(__name__)


@dataclass
class Tank:
    """A player-controlled tank."""

    id: int
    x: float
    y: float
    heading: float
    color: Color
    controls: Controls
    hp: int = 3
    radius: float = 25.0
    speed: float = 3.0
    rotation_speed: float = 0.05
    cooldown: float = 500.0
    last_shot: Optional[float] = None
    projectiles: List[Projectile] = field(default_factory=list)
    on_hit: Optional[Callable[["Tank"], None]] = field(default=None, repr=False)

    @property
    def alive(self) -> bool:
        return self.hp > 0

    @property
    def display_hp(self) -> int:
        return max(0, self.hp)

    # ------------------------------------------------------------------
    # Frame update
    def update(
        self,
        settings: ArenaSettings,
        obstacles: Sequence[Obstacle],
        enemy: "Tank",
        keys: InputState,
        particles: ParticleSystem,
        now: float,
    ) -> None:
        if not self.alive:
            return
        self._drive(settings, obstacles, enemy, keys)
        if keys.is_pressed(self.controls.shoot) and self.can_fire(now):
            self.fire(settings, now)
        self._update_projectiles(settings, obstacles, enemy, particles)

    def _drive(
        self,
        settings: ArenaSettings,
        obstacles: Sequence[Obstacle],
        enemy: "Tank",
        keys: InputState,
    ) -> None:
        controls = self.controls
        next_x = self.x
        next_y = self.y
        next_heading = self.heading

        if keys.is_pressed(controls.forward):
            next_x += math.cos(self.heading) * self.speed
            next_y += math.sin(self.heading) * self.speed
        if keys.is_pressed(controls.backward):
            next_x -= math.cos(self.heading) * self.speed * 0.5
            next_y -= math.sin(self.heading) * self.speed * 0.5
        if keys.is_pressed(controls.left):
            next_heading -= self.rotation_speed
        if keys.is_pressed(controls.right):
            next_heading += self.rotation_speed

        if (next_x, next_y) != (self.x, self.y) and self.can_occupy(
            settings, obstacles, enemy, next_x, next_y
        ):
            self.x = next_x
            self.y = next_y
        self.heading = next_heading

    def can_occupy(
        self,
        settings: ArenaSettings,
        obstacles: Sequence[Obstacle],
        enemy: "Tank",
        x: float,
        y: float,
    ) -> bool:
        """Return whether a tentative position passes wall, obstacle and tank checks."""

        r = self.radius
        if not (r < x < settings.width - r and r < y < settings.height - r):
            return False
        if any(obstacle.overlaps_square(x, y, r) for obstacle in obstacles):
            return False
        return math.hypot(x - enemy.x, y - enemy.y) >= r * 2

    # ------------------------------------------------------------------
    # Firing
    def can_fire(self, now: float) -> bool:
        return self.last_shot is None or now - self.last_shot >= self.cooldown

    def fire(self, settings: ArenaSettings, now: float) -> Projectile:
        projectile = Projectile(
            x=self.x + math.cos(self.heading) * settings.muzzle_offset,
            y=self.y + math.sin(self.heading) * settings.muzzle_offset,
            heading=self.heading,
            owner=self.id,
            speed=settings.projectile_speed,
            radius=settings.projectile_radius,
        )
        self.projectiles.append(projectile)
        self.last_shot = now
        logger.debug("Tank %d fired from (%.1f, %.1f)", self.id, projectile.x, projectile.y)
        return projectile

    def _update_projectiles(
        self,
        settings: ArenaSettings,
        obstacles: Sequence[Obstacle],
        enemy: "Tank",
        particles: ParticleSystem,
    ) -> None:
        for projectile in self.projectiles:
            projectile.advance(settings)
            if not projectile.active:
                continue
            for obstacle in obstacles:
                if obstacle.contains_point(projectile.x, projectile.y):
                    particles.create_explosion(projectile.x, projectile.y, OBSTACLE_COLOR)
                    projectile.deactivate()
                    break
            if not projectile.active:
                continue
            distance = math.hypot(projectile.x - enemy.x, projectile.y - enemy.y)
            if enemy.alive and distance < enemy.radius:
                particles.create_explosion(projectile.x, projectile.y, enemy.color)
                projectile.deactivate()
                enemy.hit()
        self.projectiles = [p for p in self.projectiles if p.active]

    # ------------------------------------------------------------------
    # Damage
    def hit(self) -> None:
        self.hp -= 1
        logger.debug("Tank %d hit, hp now %d", self.id, self.hp)
        if self.on_hit is not None:
            self.on_hit(self)


__all__ = ["Tank"]
