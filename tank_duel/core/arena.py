"""Arena geometry, palette and default layout for the tank duel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

Color = Tuple[int, int, int]

PLAYER_COLORS: Tuple[Color, Color] = ((46, 204, 113), (231, 76, 60))
PLAYER_DARK_COLORS: Tuple[Color, Color] = ((39, 174, 96), (192, 57, 43))
OBSTACLE_COLOR: Color = (243, 156, 18)


@dataclass
class ArenaSettings:
    """Configuration options for the arena and the tanks fighting in it."""

    width: int = 1000
    height: int = 700
    tank_radius: float = 25.0
    tank_speed: float = 3.0
    rotation_speed: float = 0.05
    cooldown_ms: float = 500.0
    starting_hp: int = 3
    spawn_margin: float = 100.0
    projectile_speed: float = 7.0
    projectile_radius: float = 8.0
    muzzle_offset: float = 35.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("arena dimensions must be positive")
        if self.tank_radius <= 0:
            raise ValueError("tank radius must be positive")

    def spawn_points(self) -> List[Tuple[float, float, float]]:
        """Return (x, y, heading) for player one and player two."""

        mid_y = self.height / 2
        return [
            (self.spawn_margin, mid_y, 0.0),
            (self.width - self.spawn_margin, mid_y, math.pi),
        ]

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height


@dataclass(frozen=True)
class Obstacle:
    """Static axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains_point(self, px: float, py: float) -> bool:
        return self.x < px < self.right and self.y < py < self.bottom

    def overlaps_square(self, cx: float, cy: float, half_size: float) -> bool:
        """Test the square centred on (cx, cy) against this rectangle."""

        return (
            cx + half_size > self.x
            and cx - half_size < self.right
            and cy + half_size > self.y
            and cy - half_size < self.bottom
        )


def default_obstacles(settings: ArenaSettings) -> List[Obstacle]:
    """Build the fixed five-block layout, mirrored around the centre."""

    width = settings.width
    height = settings.height
    return [
        Obstacle(200, 150, 40, 400),
        Obstacle(width - 240, 150, 40, 400),
        Obstacle(400, 100, 200, 40),
        Obstacle(400, height - 140, 200, 40),
        Obstacle(480, 300, 40, 100),
    ]


__all__ = [
    "ArenaSettings",
    "Color",
    "OBSTACLE_COLOR",
    "Obstacle",
    "PLAYER_COLORS",
    "PLAYER_DARK_COLORS",
    "default_obstacles",
]
