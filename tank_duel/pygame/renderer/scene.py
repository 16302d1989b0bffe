"""Rendering helpers for the tank duel pygame client."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import pygame

from tank_duel.core.arena import PLAYER_DARK_COLORS, Obstacle
from tank_duel.core.particles import Particle
from tank_duel.core.projectile import Projectile
from tank_duel.core.tank import Tank

Point = Tuple[float, float]

BACKGROUND_COLOR = pygame.Color(22, 24, 38)
GRID_SPACING = 50
TRACK_COLOR = pygame.Color(51, 51, 51)
CUPCAKE_BASE = pygame.Color(211, 84, 0)
CUPCAKE_FROSTING = pygame.Color(255, 133, 162)
CUPCAKE_TOP = pygame.Color(255, 255, 255)
SPRINKLE_COLORS = (
    pygame.Color(241, 196, 15),
    pygame.Color(155, 89, 182),
    pygame.Color(52, 152, 219),
)


def _blend_color(color: pygame.Color, other: pygame.Color, ratio: float) -> pygame.Color:
    clamped = max(0.0, min(1.0, ratio))
    inv = 1.0 - clamped
    return pygame.Color(
        int(color.r * inv + other.r * clamped),
        int(color.g * inv + other.g * clamped),
        int(color.b * inv + other.b * clamped),
    )


def _rot(pt: Point, ang: float) -> Point:
    ca, sa = math.cos(ang), math.sin(ang)
    return (pt[0] * ca - pt[1] * sa, pt[0] * sa + pt[1] * ca)


def _transform(points: Iterable[Point], origin: Point, angle: float) -> List[Point]:
    ox, oy = origin
    result: List[Point] = []
    for point in points:
        rx, ry = _rot(point, angle)
        result.append((ox + rx, oy + ry))
    return result


def _rect_points(x: float, y: float, w: float, h: float) -> List[Point]:
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


def _draw_local_rect(
    surface: pygame.Surface,
    color: pygame.Color,
    origin: Point,
    angle: float,
    rect: Tuple[float, float, float, float],
) -> None:
    pygame.draw.polygon(surface, color, _transform(_rect_points(*rect), origin, angle))


# ----------------------------------------------------------------------
# Arena
def draw_background(app) -> None:
    surface = app.playfield
    surface.fill(BACKGROUND_COLOR)
    line_color = _blend_color(BACKGROUND_COLOR, pygame.Color("white"), 0.03)
    width, height = surface.get_size()
    for x in range(0, width, GRID_SPACING):
        pygame.draw.line(surface, line_color, (x, 0), (x, height))
    for y in range(0, height, GRID_SPACING):
        pygame.draw.line(surface, line_color, (0, y), (width, y))


def draw_obstacles(app, obstacles: Sequence[Obstacle]) -> None:
    surface = app.playfield
    fill = app.obstacle_color
    outline = _blend_color(fill, pygame.Color("white"), 0.2)
    highlight = _blend_color(fill, pygame.Color("white"), 0.1)
    for obstacle in obstacles:
        rect = pygame.Rect(int(obstacle.x), int(obstacle.y), int(obstacle.w), int(obstacle.h))
        pygame.draw.rect(surface, fill, rect)
        pygame.draw.rect(surface, highlight, pygame.Rect(rect.x, rect.y, rect.w, 4))
        pygame.draw.rect(surface, outline, rect, width=1)


# ----------------------------------------------------------------------
# Tanks and projectiles
def _draw_glow(surface: pygame.Surface, center: Point, color: pygame.Color) -> None:
    radius = 36
    glow = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    for step in range(6):
        r = radius - step * 4
        pygame.draw.circle(glow, (color.r, color.g, color.b, 14), (radius, radius), r)
    surface.blit(glow, (int(center[0]) - radius, int(center[1]) - radius))


def draw_tank(app, tank: Tank) -> None:
    if not tank.alive:
        return
    surface = app.playfield
    origin = (tank.x, tank.y)
    angle = tank.heading
    color = pygame.Color(*tank.color)
    dark = pygame.Color(*PLAYER_DARK_COLORS[(tank.id - 1) % len(PLAYER_DARK_COLORS)])

    _draw_glow(surface, origin, color)
    _draw_local_rect(surface, color, origin, angle, (-20, -20, 40, 40))
    _draw_local_rect(surface, TRACK_COLOR, origin, angle, (-22, -22, 44, 10))
    _draw_local_rect(surface, TRACK_COLOR, origin, angle, (-22, 12, 44, 10))
    pygame.draw.circle(surface, dark, (int(round(tank.x)), int(round(tank.y))), 12)
    _draw_local_rect(surface, color, origin, angle, (10, -5, 25, 10))


def draw_projectile(app, projectile: Projectile) -> None:
    surface = app.playfield
    origin = (projectile.x, projectile.y)
    angle = projectile.heading + math.pi / 2

    base = _transform([(-5, 0), (5, 0), (4, 5), (-4, 5)], origin, angle)
    pygame.draw.polygon(surface, CUPCAKE_BASE, base)
    frosting = _transform([(0, -2)], origin, angle)[0]
    pygame.draw.circle(surface, CUPCAKE_FROSTING, frosting, 5)
    top = _transform([(0, -4)], origin, angle)[0]
    pygame.draw.circle(surface, CUPCAKE_TOP, top, 3)
    for idx, sprinkle in enumerate(SPRINKLE_COLORS):
        _draw_local_rect(surface, sprinkle, origin, angle, ((idx - 1) * 2, -4, 1, 1))


def draw_tanks(app, tanks: Sequence[Tank]) -> None:
    for tank in tanks:
        if not tank.alive:
            continue
        draw_tank(app, tank)
        for projectile in tank.projectiles:
            draw_projectile(app, projectile)


# ----------------------------------------------------------------------
# Effects
def draw_particles(app, particles: Iterable[Particle]) -> None:
    surface = app.playfield
    for particle in particles:
        alpha = int(max(0.0, min(1.0, particle.alpha)) * 255)
        if alpha <= 0:
            continue
        radius = max(1, int(round(particle.size)))
        r, g, b = particle.color
        dot = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(dot, (r, g, b, alpha), (radius, radius), radius)
        surface.blit(dot, (int(round(particle.x)) - radius, int(round(particle.y)) - radius))


__all__ = [
    "draw_background",
    "draw_obstacles",
    "draw_particles",
    "draw_projectile",
    "draw_tank",
    "draw_tanks",
]
