"""Fixed keyboard layout for the two players."""

from __future__ import annotations

from typing import List

import pygame

from tank_duel.core.controls import Controls


def default_bindings() -> List[Controls]:
    """WASD + Space for player one, arrow keys + Return for player two."""

    return [
        Controls(
            forward=pygame.K_w,
            backward=pygame.K_s,
            left=pygame.K_a,
            right=pygame.K_d,
            shoot=pygame.K_SPACE,
        ),
        Controls(
            forward=pygame.K_UP,
            backward=pygame.K_DOWN,
            left=pygame.K_LEFT,
            right=pygame.K_RIGHT,
            shoot=pygame.K_RETURN,
        ),
    ]


def format_key(key: int) -> str:
    return pygame.key.name(key).upper()


def describe_bindings(bindings: Controls) -> str:
    move = "/".join(
        format_key(key)
        for key in (bindings.forward, bindings.left, bindings.backward, bindings.right)
    )
    return f"Move {move}  Fire {format_key(bindings.shoot)}"


__all__ = ["default_bindings", "describe_bindings", "format_key"]
